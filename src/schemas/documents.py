from typing import Any, List, Optional

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from .examples.documents import (
    document_response_schema_example,
    document_list_response_schema_example,
    insert_response_schema_example,
    update_response_schema_example,
    delete_response_schema_example
)


def serialize_document(document: Any) -> Any:
    """Make a MongoDB document (or list of documents) JSON compatible.

    ObjectIds become their hex string and datetimes ISO-8601 strings; every
    other field passes through untouched.
    """
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


class InsertResultSchema(BaseModel):
    acknowledged: bool
    inserted_id: str = Field(..., alias="insertedId")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResultSchema":
        return cls(
            acknowledged=result.acknowledged,
            insertedId=str(result.inserted_id)
        )


class UpdateResultSchema(BaseModel):
    acknowledged: bool
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResultSchema":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=str(upserted_id) if upserted_id is not None else None
        )


class DeleteResultSchema(BaseModel):
    acknowledged: bool
    deleted_count: int = Field(..., alias="deletedCount")

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteResultSchema":
        return cls(
            acknowledged=result.acknowledged,
            deletedCount=result.deleted_count
        )


class DocumentResponseSchema(BaseModel):
    status: int
    data: dict[str, Any]

    model_config = ConfigDict(
        json_schema_extra={
            "example": document_response_schema_example
        }
    )


class DocumentListResponseSchema(BaseModel):
    status: int
    data: List[dict[str, Any]]

    model_config = ConfigDict(
        json_schema_extra={
            "example": document_list_response_schema_example
        }
    )


class MessageResponseSchema(BaseModel):
    status: int
    message: str


class InsertResponseSchema(MessageResponseSchema):
    data: InsertResultSchema

    model_config = ConfigDict(
        json_schema_extra={
            "example": insert_response_schema_example
        }
    )


class InsertedIdResponseSchema(MessageResponseSchema):
    data: str


class UpdateResponseSchema(MessageResponseSchema):
    data: UpdateResultSchema

    model_config = ConfigDict(
        json_schema_extra={
            "example": update_response_schema_example
        }
    )


class DeleteResponseSchema(MessageResponseSchema):
    data: DeleteResultSchema

    model_config = ConfigDict(
        json_schema_extra={
            "example": delete_response_schema_example
        }
    )
