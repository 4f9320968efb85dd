from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from config.dependencies import get_database
from config.logger import logger
from config.settings import BaseAppSettings, get_settings
from database import MOVIES_COLLECTION
from exceptions.api import InternalError, NotFoundError, ValidationError
from schemas.documents import (
    serialize_document,
    DocumentResponseSchema,
    DocumentListResponseSchema,
    InsertResponseSchema,
    InsertResultSchema,
    UpdateResponseSchema,
    UpdateResultSchema,
    DeleteResponseSchema,
    DeleteResultSchema
)
from validation.identifiers import validate_object_id

router = APIRouter()

INVALID_MOVIE_ID = "Invalid movie ID"

invalid_id_response = {
    "description": "Malformed movie identifier",
    "content": {
        "application/json": {
            "example": {"status": 400, "message": INVALID_MOVIE_ID}
        }
    }
}
internal_error_response = {
    "description": "Database failure",
    "content": {
        "application/json": {
            "example": {
                "status": 500,
                "message": "Internal Server Error",
                "error": "An unexpected database error occurred."
            }
        }
    }
}


@router.get(
    "/movies",
    response_model=DocumentListResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="List movies",
    description="Return the first movies of the collection, capped at "
                "`MOVIES_LIST_LIMIT` (10 by default).",
    responses={500: internal_error_response}
)
async def list_movies(
    settings: BaseAppSettings = Depends(get_settings),
    db: AsyncDatabase = Depends(get_database)
) -> DocumentListResponseSchema:
    try:
        movies = await (
            db[MOVIES_COLLECTION]
            .find({})
            .limit(settings.MOVIES_LIST_LIMIT)
            .to_list()
        )
    except PyMongoError:
        logger.exception("Failed to list movies")
        raise InternalError

    return DocumentListResponseSchema(
        status=status.HTTP_200_OK,
        data=serialize_document(movies)
    )


@router.get(
    "/movies/{movie_id}",
    response_model=DocumentResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Get movie by ID",
    responses={
        400: invalid_id_response,
        404: {
            "description": "Movie not found",
            "content": {
                "application/json": {
                    "example": {"status": 404, "message": "Movie not found"}
                }
            }
        },
        500: internal_error_response
    }
)
async def get_movie(
    movie_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DocumentResponseSchema:
    """Fetch one movie.

    Args:
        movie_id (str): 24-character hex identifier of the movie.
        db (AsyncDatabase): Database dependency.

    Returns:
        DocumentResponseSchema: The movie document.
    """
    object_id = validate_object_id(movie_id, INVALID_MOVIE_ID)

    try:
        movie = await db[MOVIES_COLLECTION].find_one({"_id": object_id})
    except PyMongoError:
        logger.exception(f"Failed to fetch movie {movie_id}")
        raise InternalError

    if not movie:
        raise NotFoundError("Movie not found")

    return DocumentResponseSchema(
        status=status.HTTP_200_OK,
        data=serialize_document(movie)
    )


@router.post(
    "/movies/{movie_id}",
    response_model=InsertResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create movie with a given ID",
    description="Insert the request body as a new movie whose `_id` is the "
                "identifier from the path.",
    responses={400: invalid_id_response, 500: internal_error_response}
)
async def create_movie(
    movie_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> InsertResponseSchema:
    """Create a movie with a caller-chosen identifier.

    Args:
        movie_id (str): Identifier the new document will have.
        data (dict[str, Any]): Movie fields, stored as given.
        db (AsyncDatabase): Database dependency.

    Returns:
        InsertResponseSchema: The insert result.
    """
    object_id = validate_object_id(movie_id, INVALID_MOVIE_ID)

    try:
        result = await db[MOVIES_COLLECTION].insert_one(
            {**data, "_id": object_id}
        )
    except DuplicateKeyError:
        raise ValidationError("A movie with this ID already exists")
    except PyMongoError:
        logger.exception(f"Failed to create movie {movie_id}")
        raise InternalError

    return InsertResponseSchema(
        status=status.HTTP_201_CREATED,
        message="Movie created",
        data=InsertResultSchema.from_result(result)
    )


@router.put(
    "/movies/{movie_id}",
    response_model=UpdateResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Update movie",
    description="Set the fields of the request body on the movie.",
    responses={400: invalid_id_response, 500: internal_error_response}
)
async def update_movie(
    movie_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> UpdateResponseSchema:
    object_id = validate_object_id(movie_id, INVALID_MOVIE_ID)

    try:
        result = await db[MOVIES_COLLECTION].update_one(
            {"_id": object_id},
            {"$set": data}
        )
    except PyMongoError:
        logger.exception(f"Failed to update movie {movie_id}")
        raise InternalError

    return UpdateResponseSchema(
        status=status.HTTP_200_OK,
        message="Movie updated",
        data=UpdateResultSchema.from_result(result)
    )


@router.delete(
    "/movies/{movie_id}",
    response_model=DeleteResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Delete movie",
    description="Delete the movie. Its comments are left in place.",
    responses={400: invalid_id_response, 500: internal_error_response}
)
async def delete_movie(
    movie_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DeleteResponseSchema:
    object_id = validate_object_id(movie_id, INVALID_MOVIE_ID)

    try:
        result = await db[MOVIES_COLLECTION].delete_one({"_id": object_id})
    except PyMongoError:
        logger.exception(f"Failed to delete movie {movie_id}")
        raise InternalError

    return DeleteResponseSchema(
        status=status.HTTP_200_OK,
        message="Movie deleted",
        data=DeleteResultSchema.from_result(result)
    )
