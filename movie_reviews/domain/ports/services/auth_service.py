from abc import ABC, abstractmethod
from typing import Optional


class AuthService(ABC):
    @abstractmethod
    def create_access_token(self, subject: str) -> str:
        pass

    @abstractmethod
    def get_subject(self, token: str) -> Optional[str]:
        pass
