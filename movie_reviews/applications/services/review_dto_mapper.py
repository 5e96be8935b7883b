from movie_reviews.applications.interfaces.dtos.review import (
    ReviewDetailPublic,
    ReviewMoviePublic,
    ReviewPublic,
    ReviewUserPublic,
)
from movie_reviews.domain.models.review import Review, ReviewDetail


class ReviewDtoMapper:
    @staticmethod
    def to_public(review: Review) -> ReviewPublic:
        return ReviewPublic(
            id=review.id,
            description=review.description,
            user=review.user_id,
            movie=review.movie_id,
            like_count=review.like_count,
            dislike_count=review.dislike_count,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )

    @staticmethod
    def to_detail_public(review: ReviewDetail) -> ReviewDetailPublic:
        return ReviewDetailPublic(
            id=review.id,
            description=review.description,
            user=ReviewUserPublic(id=review.user.id, user_name=review.user.user_name),
            movie=ReviewMoviePublic(id=review.movie.id, title=review.movie.title),
            like_count=review.like_count,
            dislike_count=review.dislike_count,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )
