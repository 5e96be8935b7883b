from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from movie_reviews.applications.interfaces.dtos.message import Message
from movie_reviews.applications.interfaces.dtos.review import (
    ReviewCreateSchema,
    ReviewList,
    ReviewMessage,
    ReviewResponse,
    ReviewUpdateSchema,
)
from movie_reviews.applications.use_cases.review.create_review import CreateReviewUseCase
from movie_reviews.applications.use_cases.review.delete_review import DeleteReviewUseCase
from movie_reviews.applications.use_cases.review.get_review import GetReviewUseCase
from movie_reviews.applications.use_cases.review.get_reviews import GetReviewsUseCase
from movie_reviews.applications.use_cases.review.list_movie_reviews import ListMovieReviewsUseCase
from movie_reviews.applications.use_cases.review.update_review import UpdateReviewUseCase
from movie_reviews.domain.exceptions import (
    InvalidIdentifierError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from movie_reviews.domain.ports.repositories.movie_repository import MovieRepository
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository
from movie_reviews.domain.ports.repositories.user_repository import UserRepository
from movie_reviews.infrastructure.config.dependencies import (
    get_current_subject,
    get_movie_repository,
    get_review_repository,
    get_review_settings,
    get_user_repository,
)
from movie_reviews.infrastructure.config.settings import ReviewSettings
from movie_reviews.infrastructure.logging.logger import Logger
from movie_reviews.presentation.errors import HttpError

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])

ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
ReviewSettingsDep = Annotated[ReviewSettings, Depends(get_review_settings)]
CurrentSubjectDep = Annotated[str, Depends(get_current_subject)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=ReviewMessage)
async def create_review(
    payload: ReviewCreateSchema,
    review_repository: ReviewRepositoryDep,
    user_repository: UserRepositoryDep,
    movie_repository: MovieRepositoryDep,
    review_settings: ReviewSettingsDep,
):
    try:
        use_case = CreateReviewUseCase(
            review_repository,
            user_repository=user_repository,
            movie_repository=movie_repository,
            check_references=review_settings.check_references,
        )
        review = await use_case.execute(payload)
    except InvalidIdentifierError as e:
        raise HttpError(str(e), HTTPStatus.BAD_REQUEST)
    except ValidationError as e:
        logger.warning(f"Rejected review: {e}")
        raise HttpError(f"Validation error: {e}", HTTPStatus.BAD_REQUEST)
    except RepositoryError:
        logger.exception("Error saving review")
        raise HttpError("Creating review failed, please try again.")

    return ReviewMessage(message="Review created successfully", review=review)


@router.get("/", response_model=ReviewList)
async def read_reviews(review_repository: ReviewRepositoryDep):
    try:
        use_case = GetReviewsUseCase(review_repository)
        return await use_case.execute()
    except RepositoryError:
        logger.exception("Error fetching reviews")
        raise HttpError("Fetching reviews failed, please try again later.")


@router.get("/movie/{movie_id}", response_model=ReviewList)
async def read_movie_reviews(movie_id: str, review_repository: ReviewRepositoryDep, subject: CurrentSubjectDep):
    logger.debug(f"Listing reviews of movie {movie_id} for {subject}")
    try:
        use_case = ListMovieReviewsUseCase(review_repository)
        return await use_case.execute(movie_id)
    except InvalidIdentifierError as e:
        raise HttpError(str(e), HTTPStatus.BAD_REQUEST)
    except RepositoryError:
        logger.exception(f"Error fetching reviews of movie {movie_id}")
        raise HttpError("Fetching reviews failed, please try again later.")


@router.get("/{review_id}", response_model=ReviewResponse)
async def read_review(review_id: str, review_repository: ReviewRepositoryDep):
    try:
        use_case = GetReviewUseCase(review_repository)
        review = await use_case.execute(review_id)
    except InvalidIdentifierError as e:
        raise HttpError(str(e), HTTPStatus.BAD_REQUEST)
    except NotFoundError as e:
        raise HttpError(str(e), HTTPStatus.NOT_FOUND)
    except RepositoryError:
        logger.exception(f"Error fetching review {review_id}")
        raise HttpError("Fetching review failed, please try again later.")

    return ReviewResponse(review=review)


@router.patch("/{review_id}", response_model=ReviewMessage)
async def update_review(review_id: str, payload: ReviewUpdateSchema, review_repository: ReviewRepositoryDep):
    try:
        use_case = UpdateReviewUseCase(review_repository)
        review = await use_case.execute(review_id, payload)
    except InvalidIdentifierError as e:
        raise HttpError(str(e), HTTPStatus.BAD_REQUEST)
    except ValidationError as e:
        logger.warning(f"Rejected review update: {e}")
        raise HttpError(f"Validation error: {e}", HTTPStatus.BAD_REQUEST)
    except NotFoundError as e:
        raise HttpError(str(e), HTTPStatus.NOT_FOUND)
    except RepositoryError:
        logger.exception(f"Error updating review {review_id}")
        raise HttpError("Updating review failed, please try again.")

    return ReviewMessage(message="Review updated successfully", review=review)


@router.delete("/{review_id}", response_model=Message)
async def delete_review(review_id: str, review_repository: ReviewRepositoryDep):
    try:
        use_case = DeleteReviewUseCase(review_repository)
        return await use_case.execute(review_id)
    except InvalidIdentifierError as e:
        raise HttpError(str(e), HTTPStatus.BAD_REQUEST)
    except RepositoryError:
        logger.exception(f"Error deleting review {review_id}")
        raise HttpError("Deleting review failed, please try again.")
