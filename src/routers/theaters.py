from typing import Any

from fastapi import APIRouter, Body, Depends, status
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from config.dependencies import get_database
from config.logger import logger
from database import THEATERS_COLLECTION
from exceptions.api import InternalError, NotFoundError, ValidationError
from schemas.documents import (
    serialize_document,
    DocumentResponseSchema,
    DocumentListResponseSchema,
    InsertedIdResponseSchema,
    InsertResponseSchema,
    InsertResultSchema,
    UpdateResponseSchema,
    UpdateResultSchema,
    DeleteResponseSchema,
    DeleteResultSchema
)
from validation.identifiers import validate_object_id

router = APIRouter()

INVALID_THEATER_ID = "Invalid theater ID"


@router.get(
    "/theaters",
    response_model=DocumentListResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="List theaters",
    description="Return every theater of the collection."
)
async def list_theaters(
    db: AsyncDatabase = Depends(get_database)
) -> DocumentListResponseSchema:
    try:
        theaters = await db[THEATERS_COLLECTION].find({}).to_list()
    except PyMongoError:
        logger.exception("Failed to list theaters")
        raise InternalError

    return DocumentListResponseSchema(
        status=status.HTTP_200_OK,
        data=serialize_document(theaters)
    )


@router.post(
    "/theaters",
    response_model=InsertedIdResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Add theater",
    description="Insert the request body as a new theater with a generated "
                "identifier, returned as `data`."
)
async def add_theater(
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> InsertedIdResponseSchema:
    try:
        result = await db[THEATERS_COLLECTION].insert_one(dict(data))
    except PyMongoError:
        logger.exception("Failed to add theater")
        raise InternalError

    return InsertedIdResponseSchema(
        status=status.HTTP_201_CREATED,
        message="Theater added",
        data=str(result.inserted_id)
    )


@router.get(
    "/theaters/{theater_id}",
    response_model=DocumentResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Get theater by ID",
    responses={
        400: {
            "description": "Malformed theater identifier",
            "content": {
                "application/json": {
                    "example": {"status": 400, "message": INVALID_THEATER_ID}
                }
            }
        },
        404: {
            "description": "Theater not found",
            "content": {
                "application/json": {
                    "example": {"status": 404, "message": "Theater not found"}
                }
            }
        }
    }
)
async def get_theater(
    theater_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DocumentResponseSchema:
    object_id = validate_object_id(theater_id, INVALID_THEATER_ID)

    try:
        theater = await db[THEATERS_COLLECTION].find_one({"_id": object_id})
    except PyMongoError:
        logger.exception(f"Failed to fetch theater {theater_id}")
        raise InternalError

    if not theater:
        raise NotFoundError("Theater not found")

    return DocumentResponseSchema(
        status=status.HTTP_200_OK,
        data=serialize_document(theater)
    )


@router.post(
    "/theaters/{theater_id}",
    response_model=InsertResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create theater with a given ID"
)
async def create_theater(
    theater_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> InsertResponseSchema:
    object_id = validate_object_id(theater_id, INVALID_THEATER_ID)

    try:
        result = await db[THEATERS_COLLECTION].insert_one(
            {**data, "_id": object_id}
        )
    except DuplicateKeyError:
        raise ValidationError("A theater with this ID already exists")
    except PyMongoError:
        logger.exception(f"Failed to create theater {theater_id}")
        raise InternalError

    return InsertResponseSchema(
        status=status.HTTP_201_CREATED,
        message="Theater created",
        data=InsertResultSchema.from_result(result)
    )


@router.put(
    "/theaters/{theater_id}",
    response_model=UpdateResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Update theater"
)
async def update_theater(
    theater_id: str,
    data: dict[str, Any] = Body(...),
    db: AsyncDatabase = Depends(get_database)
) -> UpdateResponseSchema:
    object_id = validate_object_id(theater_id, INVALID_THEATER_ID)

    try:
        result = await db[THEATERS_COLLECTION].update_one(
            {"_id": object_id},
            {"$set": data}
        )
    except PyMongoError:
        logger.exception(f"Failed to update theater {theater_id}")
        raise InternalError

    return UpdateResponseSchema(
        status=status.HTTP_200_OK,
        message="Theater updated",
        data=UpdateResultSchema.from_result(result)
    )


@router.delete(
    "/theaters/{theater_id}",
    response_model=DeleteResponseSchema,
    status_code=status.HTTP_200_OK,
    summary="Delete theater"
)
async def delete_theater(
    theater_id: str,
    db: AsyncDatabase = Depends(get_database)
) -> DeleteResponseSchema:
    object_id = validate_object_id(theater_id, INVALID_THEATER_ID)

    try:
        result = await db[THEATERS_COLLECTION].delete_one({"_id": object_id})
    except PyMongoError:
        logger.exception(f"Failed to delete theater {theater_id}")
        raise InternalError

    return DeleteResponseSchema(
        status=status.HTTP_200_OK,
        message="Theater deleted",
        data=DeleteResultSchema.from_result(result)
    )
