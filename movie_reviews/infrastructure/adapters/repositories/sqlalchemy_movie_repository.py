from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from movie_reviews.domain.exceptions import RepositoryError
from movie_reviews.domain.models.movie import Movie as DomainMovie
from movie_reviews.domain.ports.repositories.movie_repository import MovieRepository
from movie_reviews.infrastructure.persistence.models import Movie as SQLMovie


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, movie_id: str) -> Optional[DomainMovie]:
        try:
            movie = await self.session.get(SQLMovie, movie_id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to fetch movie {movie_id}") from e
        return DomainMovie(id=movie.id, title=movie.title) if movie else None
