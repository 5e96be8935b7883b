from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from movie_reviews.applications.interfaces.dtos.review import ReviewCreateSchema, ReviewPublic
from movie_reviews.applications.services.review_dto_mapper import ReviewDtoMapper
from movie_reviews.domain.exceptions import InvalidIdentifierError, ValidationError
from movie_reviews.domain.identifiers import is_valid_object_id
from movie_reviews.domain.models.review import NewReview
from movie_reviews.domain.ports.repositories.movie_repository import MovieRepository
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository
from movie_reviews.domain.ports.repositories.user_repository import UserRepository
from movie_reviews.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateReviewUseCase:
    def __init__(
        self,
        review_repository: ReviewRepository,
        user_repository: Optional[UserRepository] = None,
        movie_repository: Optional[MovieRepository] = None,
        check_references: bool = False,
    ):
        self.review_repository = review_repository
        self.user_repository = user_repository
        self.movie_repository = movie_repository
        self.check_references = check_references

    async def execute(self, review_data: ReviewCreateSchema) -> ReviewPublic:
        if not is_valid_object_id(review_data.user) or not is_valid_object_id(review_data.movie):
            raise InvalidIdentifierError("Invalid User or Movie ID format.")

        fields = {"description": review_data.description, "user_id": review_data.user, "movie_id": review_data.movie}
        try:
            new_review = NewReview.model_validate({key: value for key, value in fields.items() if value is not None})
        except PydanticValidationError as e:
            raise ValidationError.from_errors(e.errors()) from e

        if self.check_references:
            await self._ensure_references_exist(new_review)

        logger.info(f"Creating review for movie {new_review.movie_id} by user {new_review.user_id}")
        created_review = await self.review_repository.create(new_review)
        logger.info(f"Review created successfully: {created_review.id}")

        return ReviewDtoMapper.to_public(created_review)

    async def _ensure_references_exist(self, review: NewReview) -> None:
        if self.user_repository is None or self.movie_repository is None:
            raise RuntimeError("Reference check requires user and movie repositories")

        if await self.user_repository.get_by_id(review.user_id) is None:
            raise ValidationError(f"user: User {review.user_id} does not exist")
        if await self.movie_repository.get_by_id(review.movie_id) is None:
            raise ValidationError(f"movie: Movie {review.movie_id} does not exist")
