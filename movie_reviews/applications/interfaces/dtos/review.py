from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ReviewCreateSchema(BaseModel):
    """Create payload. Fields are optional so identifiers are checked before the description."""

    description: Optional[str] = None
    user: Optional[str] = None
    movie: Optional[str] = None


class ReviewUpdateSchema(BaseModel):
    model_config = _camel_config

    description: Optional[str] = None
    like_count: Optional[int] = None
    dislike_count: Optional[int] = None


class ReviewPublic(BaseModel):
    model_config = _camel_config

    id: str
    description: str
    user: str
    movie: str
    like_count: int
    dislike_count: int
    created_at: datetime
    updated_at: datetime


class ReviewUserPublic(BaseModel):
    model_config = _camel_config

    id: str
    user_name: Optional[str] = None


class ReviewMoviePublic(BaseModel):
    model_config = _camel_config

    id: str
    title: Optional[str] = None


class ReviewDetailPublic(BaseModel):
    model_config = _camel_config

    id: str
    description: str
    user: ReviewUserPublic
    movie: ReviewMoviePublic
    like_count: int
    dislike_count: int
    created_at: datetime
    updated_at: datetime


class ReviewList(BaseModel):
    reviews: list[ReviewDetailPublic]


class ReviewResponse(BaseModel):
    review: ReviewDetailPublic


class ReviewMessage(BaseModel):
    message: str
    review: ReviewPublic
