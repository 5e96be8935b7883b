from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    id: str
    user_name: Optional[str] = None
