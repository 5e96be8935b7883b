from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_reviews.domain.exceptions import RepositoryError
from movie_reviews.domain.models.movie import Movie as DomainMovie
from movie_reviews.domain.models.review import NewReview, ReviewDetail, ReviewPatch
from movie_reviews.domain.models.review import Review as DomainReview
from movie_reviews.domain.models.user import User as DomainUser
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository
from movie_reviews.infrastructure.persistence.models import Movie as SQLMovie
from movie_reviews.infrastructure.persistence.models import Review as SQLReview
from movie_reviews.infrastructure.persistence.models import User as SQLUser


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SQLAlchemyReviewRepository(ReviewRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_review: SQLReview) -> DomainReview:
        return DomainReview(
            id=sql_review.id,
            description=sql_review.description,
            user_id=sql_review.user_id,
            movie_id=sql_review.movie_id,
            like_count=sql_review.like_count,
            dislike_count=sql_review.dislike_count,
            created_at=sql_review.created_at,
            updated_at=sql_review.updated_at,
        )

    def _to_detail(self, sql_review: SQLReview, user_name: Optional[str], title: Optional[str]) -> ReviewDetail:
        return ReviewDetail(
            id=sql_review.id,
            description=sql_review.description,
            user=DomainUser(id=sql_review.user_id, user_name=user_name),
            movie=DomainMovie(id=sql_review.movie_id, title=title),
            like_count=sql_review.like_count,
            dislike_count=sql_review.dislike_count,
            created_at=sql_review.created_at,
            updated_at=sql_review.updated_at,
        )

    def _detail_query(self):
        return (
            select(SQLReview, SQLUser.user_name, SQLMovie.title)
            .outerjoin(SQLUser, SQLUser.id == SQLReview.user_id)
            .outerjoin(SQLMovie, SQLMovie.id == SQLReview.movie_id)
            .order_by(SQLReview.created_at, SQLReview.id)
        )

    async def _fetch_details(self, query) -> List[ReviewDetail]:
        result = await self.session.execute(query)
        return [self._to_detail(review, user_name, title) for review, user_name, title in result.all()]

    async def create(self, review: NewReview) -> DomainReview:
        now = _utcnow()
        sql_review = SQLReview(
            description=review.description,
            user_id=review.user_id,
            movie_id=review.movie_id,
            created_at=now,
            updated_at=now,
        )
        try:
            self.session.add(sql_review)
            await self.session.commit()
            await self.session.refresh(sql_review)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError("Failed to create review") from e
        return self._to_domain(sql_review)

    async def get_all(self) -> List[ReviewDetail]:
        try:
            return await self._fetch_details(self._detail_query())
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to fetch reviews") from e

    async def get_by_movie_id(self, movie_id: str) -> List[ReviewDetail]:
        query = self._detail_query().where(SQLReview.movie_id == movie_id)
        try:
            return await self._fetch_details(query)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to fetch reviews for movie {movie_id}") from e

    async def get_by_id(self, review_id: str) -> Optional[ReviewDetail]:
        query = self._detail_query().where(SQLReview.id == review_id)
        try:
            details = await self._fetch_details(query)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to fetch review {review_id}") from e
        return details[0] if details else None

    async def update(self, review_id: str, patch: ReviewPatch) -> Optional[DomainReview]:
        try:
            sql_review = await self.session.get(SQLReview, review_id)
            if sql_review is None:
                return None

            for field, value in patch.changes().items():
                setattr(sql_review, field, value)
            # updated_at must advance even if the clock has not
            sql_review.updated_at = max(_utcnow(), sql_review.updated_at + timedelta(microseconds=1))

            await self.session.commit()
            await self.session.refresh(sql_review)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Failed to update review {review_id}") from e
        return self._to_domain(sql_review)

    async def delete(self, review_id: str) -> None:
        try:
            await self.session.execute(delete(SQLReview).where(SQLReview.id == review_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Failed to delete review {review_id}") from e
