from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, registry

from movie_reviews.domain.identifiers import new_object_id

table_registry = registry()

OBJECT_ID_LENGTH = 24


@table_registry.mapped_as_dataclass
class Review:
    __tablename__ = "reviews"

    id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), init=False, primary_key=True, default=new_object_id)
    description: Mapped[str] = mapped_column(Text)
    # plain identifiers, not foreign keys: dangling references are accepted
    user_id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), index=True)
    movie_id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), index=True)
    created_at: Mapped[datetime]
    updated_at: Mapped[datetime]
    like_count: Mapped[int] = mapped_column(default=0)
    dislike_count: Mapped[int] = mapped_column(default=0)


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), primary_key=True)
    user_name: Mapped[str]


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(OBJECT_ID_LENGTH), primary_key=True)
    title: Mapped[str]
