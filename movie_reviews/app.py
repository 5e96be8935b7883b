from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from movie_reviews.applications.interfaces.dtos.message import Message
from movie_reviews.infrastructure.config.settings import Settings
from movie_reviews.infrastructure.logging.logger import setup_logging
from movie_reviews.infrastructure.persistence.database import dispose_engine, get_engine, init_models, set_engine
from movie_reviews.presentation.errors import register_error_handlers
from movie_reviews.presentation.routers import reviews

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if Settings().CREATE_TABLES:
        await init_models(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Movie Reviews", lifespan=lifespan)

register_error_handlers(app)

app.include_router(reviews.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie reviews API is running"}
