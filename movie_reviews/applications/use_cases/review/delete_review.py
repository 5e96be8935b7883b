from movie_reviews.applications.interfaces.dtos.message import Message
from movie_reviews.domain.exceptions import InvalidIdentifierError
from movie_reviews.domain.identifiers import is_valid_object_id
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository
from movie_reviews.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteReviewUseCase:
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository

    async def execute(self, review_id: str) -> Message:
        if not is_valid_object_id(review_id):
            raise InvalidIdentifierError("Invalid review ID format.")

        # no existence check: deleting an absent review succeeds
        await self.review_repository.delete(review_id)
        logger.info(f"Review deleted: {review_id}")

        return Message(message="Review deleted successfully")
