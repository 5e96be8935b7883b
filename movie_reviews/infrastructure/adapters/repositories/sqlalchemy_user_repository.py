from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_reviews.domain.exceptions import RepositoryError
from movie_reviews.domain.models.user import User as DomainUser
from movie_reviews.domain.ports.repositories.user_repository import UserRepository
from movie_reviews.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[DomainUser]:
        try:
            user = await self.session.get(SQLUser, user_id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to fetch user {user_id}") from e
        return DomainUser(id=user.id, user_name=user.user_name) if user else None
