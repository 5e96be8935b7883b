from abc import ABC, abstractmethod
from typing import Optional

from movie_reviews.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: str) -> Optional[Movie]:
        pass
