from typing import Optional

from pydantic import BaseModel


class Movie(BaseModel):
    id: str
    title: Optional[str] = None
