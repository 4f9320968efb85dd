from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from config.dependencies import get_database
from config.logger import logger
from database import COMMENTS_COLLECTION
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
from validation.identifiers import validate_object_id, validate_object_ids

router = APIRouter()

INVALID_MOVIE_ID = "Invalid movie ID"
INVALID_ID = "Invalid ID"


@router.get(
    "/movies/{movie_id}/comments",
    response_model=DocumentListResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="List movie comments",
    description="Return every comment whose `movie_id` is the given movie."
)
async def list_comments(
    movie_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DocumentListResponseSchema:
    movie_object_id = validate_object_id(movie_id, INVALID_MOVIE_ID)

    try:
        comments = await (
            db[COMMENTS_COLLECTION]
            .find({"movie_id": movie_object_id})
            .to_list()
        )
    except PyMongoError:
        logger.exception(f"Failed to list comments of movie {movie_id}")
        raise InternalError

    return DocumentListResponseSchema(
        status=status.HTTP_200_OK,
        data=serialize_document(comments)
    )


@router.post(
    "/movies/{movie_id}/comments",
    response_model=InsertResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Add comment to movie",
    description="Insert the request body as a comment on the movie. "
                "`movie_id` and `date` (now, UTC) are set by the server."
)
async def add_comment(
    movie_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> InsertResponseSchema:
    """Add a comment to a movie.

    The movie itself is not looked up; a comment can reference a movie
    that does not exist.

    Args:
        movie_id (str): Identifier of the commented movie.
        data (dict[str, Any]): Comment fields (name, email, text, ...).
        db (AsyncDatabase): Database dependency.

    Returns:
        InsertResponseSchema: The insert result.
    """
    movie_object_id = validate_object_id(movie_id, INVALID_MOVIE_ID)

    comment = {
        **data,
        "movie_id": movie_object_id,
        "date": datetime.now(timezone.utc),
    }
    try:
        result = await db[COMMENTS_COLLECTION].insert_one(comment)
    except PyMongoError:
        logger.exception(f"Failed to add comment to movie {movie_id}")
        raise InternalError

    return InsertResponseSchema(
        status=status.HTTP_201_CREATED,
        message="Comment added",
        data=InsertResultSchema.from_result(result)
    )


@router.get(
    "/movies/{movie_id}/comments/{comment_id}",
    response_model=DocumentResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Get comment by ID",
    responses={
        400: {
            "description": "Malformed movie or comment identifier",
            "content": {
                "application/json": {
                    "example": {"status": 400, "message": INVALID_ID}
                }
            }
        },
        404: {
            "description": "Comment not found for this movie",
            "content": {
                "application/json": {
                    "example": {"status": 404, "message": "Comment not found"}
                }
            }
        }
    }
)
async def get_comment(
    movie_id: str,
    comment_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DocumentResponseSchema:
    movie_object_id, comment_object_id = validate_object_ids(
        movie_id, comment_id, message=INVALID_ID
    )

    try:
        comment = await db[COMMENTS_COLLECTION].find_one(
            {"_id": comment_object_id, "movie_id": movie_object_id}
        )
    except PyMongoError:
        logger.exception(f"Failed to fetch comment {comment_id}")
        raise InternalError

    if not comment:
        raise NotFoundError("Comment not found")

    return DocumentResponseSchema(
        status=status.HTTP_200_OK,
        data=serialize_document(comment)
    )


@router.post(
    "/movies/{movie_id}/comments/{comment_id}",
    response_model=InsertResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment with a given ID"
)
async def create_comment(
    movie_id: str,
    comment_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> InsertResponseSchema:
    movie_object_id, comment_object_id = validate_object_ids(
        movie_id, comment_id, message=INVALID_ID
    )

    try:
        result = await db[COMMENTS_COLLECTION].insert_one({
            **data,
            "_id": comment_object_id,
            "movie_id": movie_object_id,
        })
    except DuplicateKeyError:
        raise ValidationError("A comment with this ID already exists")
    except PyMongoError:
        logger.exception(f"Failed to create comment {comment_id}")
        raise InternalError

    return InsertResponseSchema(
        status=status.HTTP_201_CREATED,
        message="Comment created",
        data=InsertResultSchema.from_result(result)
    )


@router.put(
    "/movies/{movie_id}/comments/{comment_id}",
    response_model=UpdateResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Update comment"
)
async def update_comment(
    movie_id: str,
    comment_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> UpdateResponseSchema:
    movie_object_id, comment_object_id = validate_object_ids(
        movie_id, comment_id, message=INVALID_ID
    )

    try:
        result = await db[COMMENTS_COLLECTION].update_one(
            {"_id": comment_object_id, "movie_id": movie_object_id},
            {"$set": data}
        )
    except PyMongoError:
        logger.exception(f"Failed to update comment {comment_id}")
        raise InternalError

    return UpdateResponseSchema(
        status=status.HTTP_200_OK,
        message="Comment updated",
        data=UpdateResultSchema.from_result(result)
    )


@router.delete(
    "/movies/{movie_id}/comments/{comment_id}",
    response_model=DeleteResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Delete comment"
)
async def delete_comment(
    movie_id: str,
    comment_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DeleteResponseSchema:
    movie_object_id, comment_object_id = validate_object_ids(
        movie_id, comment_id, message=INVALID_ID
    )

    try:
        result = await db[COMMENTS_COLLECTION].delete_one(
            {"_id": comment_object_id, "movie_id": movie_object_id}
        )
    except PyMongoError:
        logger.exception(f"Failed to delete comment {comment_id}")
        raise InternalError

    return DeleteResponseSchema(
        status=status.HTTP_200_OK,
        message="Comment deleted",
        data=DeleteResultSchema.from_result(result)
    )
