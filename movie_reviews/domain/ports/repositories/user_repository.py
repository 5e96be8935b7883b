from abc import ABC, abstractmethod
from typing import Optional

from movie_reviews.domain.models.user import User


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        pass
