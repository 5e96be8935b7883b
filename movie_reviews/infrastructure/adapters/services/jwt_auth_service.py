from datetime import datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from jwt import InvalidTokenError, decode, encode

from movie_reviews.domain.ports.services.auth_service import AuthService
from movie_reviews.infrastructure.config.settings import Settings


class JWTAuthService(AuthService):
    def __init__(self, settings: Settings):
        self.settings = settings

    def create_access_token(self, subject: str) -> str:
        expire = datetime.now(tz=ZoneInfo("UTC")) + timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {"sub": subject, "exp": expire}
        return encode(to_encode, self.settings.SECRET_KEY, algorithm=self.settings.ALGORITHM)

    def get_subject(self, token: str) -> Optional[str]:
        try:
            payload = decode(token, self.settings.SECRET_KEY, algorithms=[self.settings.ALGORITHM])
        except InvalidTokenError:
            return None

        subject = payload.get("sub")
        return subject or None
