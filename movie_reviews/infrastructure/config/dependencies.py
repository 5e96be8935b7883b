from http import HTTPStatus
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from movie_reviews.domain.ports.repositories.movie_repository import MovieRepository
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository
from movie_reviews.domain.ports.repositories.user_repository import UserRepository
from movie_reviews.domain.ports.services.auth_service import AuthService
from movie_reviews.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_reviews.infrastructure.adapters.repositories.sqlalchemy_review_repository import (
    SQLAlchemyReviewRepository,
)
from movie_reviews.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from movie_reviews.infrastructure.adapters.services.jwt_auth_service import JWTAuthService
from movie_reviews.infrastructure.config.settings import ReviewSettings, Settings
from movie_reviews.infrastructure.persistence.database import get_session
from movie_reviews.presentation.errors import HttpError

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return Settings()


def get_review_settings() -> ReviewSettings:
    return ReviewSettings()


def get_review_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> ReviewRepository:
    return SQLAlchemyReviewRepository(session)


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_auth_service(settings: Annotated[Settings, Depends(get_settings)]) -> AuthService:
    return JWTAuthService(settings)


def get_current_subject(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> str:
    """Auth gate: the token subject, or a 401 when the bearer token is missing or invalid."""
    subject = auth_service.get_subject(credentials.credentials) if credentials else None
    if not subject:
        raise HttpError("Authentication failed!", HTTPStatus.UNAUTHORIZED)
    return subject
