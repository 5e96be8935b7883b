from movie_reviews.applications.interfaces.dtos.review import ReviewDetailPublic
from movie_reviews.applications.services.review_dto_mapper import ReviewDtoMapper
from movie_reviews.domain.exceptions import InvalidIdentifierError, NotFoundError
from movie_reviews.domain.identifiers import is_valid_object_id
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository


class GetReviewUseCase:
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository

    async def execute(self, review_id: str) -> ReviewDetailPublic:
        if not is_valid_object_id(review_id):
            raise InvalidIdentifierError("Invalid review ID format.")

        review = await self.review_repository.get_by_id(review_id)
        if not review:
            raise NotFoundError("Review not found.")

        return ReviewDtoMapper.to_detail_public(review)
