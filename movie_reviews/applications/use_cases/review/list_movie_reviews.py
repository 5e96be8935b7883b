from movie_reviews.applications.interfaces.dtos.review import ReviewList
from movie_reviews.applications.services.review_dto_mapper import ReviewDtoMapper
from movie_reviews.domain.exceptions import InvalidIdentifierError
from movie_reviews.domain.identifiers import is_valid_object_id
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository


class ListMovieReviewsUseCase:
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository

    async def execute(self, movie_id: str) -> ReviewList:
        if not is_valid_object_id(movie_id):
            raise InvalidIdentifierError("Invalid Movie ID format.")

        reviews = await self.review_repository.get_by_movie_id(movie_id)
        return ReviewList(reviews=[ReviewDtoMapper.to_detail_public(review) for review in reviews])
