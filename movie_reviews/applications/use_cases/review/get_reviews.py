from movie_reviews.applications.interfaces.dtos.review import ReviewList
from movie_reviews.applications.services.review_dto_mapper import ReviewDtoMapper
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository


class GetReviewsUseCase:
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository

    async def execute(self) -> ReviewList:
        reviews = await self.review_repository.get_all()
        return ReviewList(reviews=[ReviewDtoMapper.to_detail_public(review) for review in reviews])
