from pydantic import ValidationError as PydanticValidationError

from movie_reviews.applications.interfaces.dtos.review import ReviewPublic, ReviewUpdateSchema
from movie_reviews.applications.services.review_dto_mapper import ReviewDtoMapper
from movie_reviews.domain.exceptions import InvalidIdentifierError, NotFoundError, ValidationError
from movie_reviews.domain.identifiers import is_valid_object_id
from movie_reviews.domain.models.review import ReviewPatch
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository
from movie_reviews.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateReviewUseCase:
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository

    async def execute(self, review_id: str, review_data: ReviewUpdateSchema) -> ReviewPublic:
        if not is_valid_object_id(review_id):
            raise InvalidIdentifierError("Invalid review ID format.")

        try:
            patch = ReviewPatch.model_validate(review_data.model_dump(exclude_none=True))
        except PydanticValidationError as e:
            raise ValidationError.from_errors(e.errors()) from e

        logger.info(f"Updating review {review_id}: {sorted(patch.changes())}")
        updated_review = await self.review_repository.update(review_id, patch)
        if not updated_review:
            raise NotFoundError("Review not found.")

        return ReviewDtoMapper.to_public(updated_review)
