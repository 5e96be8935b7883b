from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from movie_reviews.domain.models.movie import Movie
from movie_reviews.domain.models.user import User

DESCRIPTION_MAX_LENGTH = 5000
# counters are stored in 32-bit integer columns
COUNTER_MAX = 2**31 - 1


class NewReview(BaseModel):
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    user_id: str
    movie_id: str


class ReviewPatch(BaseModel):
    """Partial update of a review. ``None`` means "leave unchanged"."""

    description: Optional[str] = Field(default=None, min_length=1, max_length=DESCRIPTION_MAX_LENGTH)
    like_count: Optional[int] = Field(default=None, ge=0, le=COUNTER_MAX)
    dislike_count: Optional[int] = Field(default=None, ge=0, le=COUNTER_MAX)

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class Review(BaseModel):
    id: str
    description: str
    user_id: str
    movie_id: str
    like_count: int = 0
    dislike_count: int = 0
    created_at: datetime
    updated_at: datetime


class ReviewDetail(BaseModel):
    """A review with its user and movie references resolved to display labels."""

    id: str
    description: str
    user: User
    movie: Movie
    like_count: int = 0
    dislike_count: int = 0
    created_at: datetime
    updated_at: datetime
