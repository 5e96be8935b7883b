from abc import ABC, abstractmethod
from typing import List, Optional

from movie_reviews.domain.models.review import NewReview, Review, ReviewDetail, ReviewPatch


class ReviewRepository(ABC):
    @abstractmethod
    async def create(self, review: NewReview) -> Review:
        pass

    @abstractmethod
    async def get_all(self) -> List[ReviewDetail]:
        pass

    @abstractmethod
    async def get_by_movie_id(self, movie_id: str) -> List[ReviewDetail]:
        pass

    @abstractmethod
    async def get_by_id(self, review_id: str) -> Optional[ReviewDetail]:
        pass

    @abstractmethod
    async def update(self, review_id: str, patch: ReviewPatch) -> Optional[Review]:
        pass

    @abstractmethod
    async def delete(self, review_id: str) -> None:
        pass
