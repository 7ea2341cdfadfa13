"""Response shapes returned by the MongoDB Data API.

The dispatcher returns the decoded JSON untouched. These models are meant for
validation after the fact, e.g.
``ReadMultipleDocuments[Comment].model_validate(result)``. Dates that the
Data API returns as ISO strings are parsed back into ``datetime`` when the
document model declares them as such.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str = Field(alias="_id")


DocumentT = TypeVar("DocumentT", bound=Document)


class ReadSingleDocument(BaseModel, Generic[DocumentT]):
    """Result of ``/findOne``. ``document`` is ``None`` when nothing matched."""

    document: Optional[DocumentT] = None


class ReadMultipleDocuments(BaseModel, Generic[DocumentT]):
    """Result of ``/find``."""

    documents: List[DocumentT]


class InsertSingleDocument(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)
    inserted_id: str = Field(alias="insertedId")


class InsertMultipleDocuments(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)
    inserted_ids: List[str] = Field(alias="insertedIds")


class UpdateOperation(BaseModel):
    """Result of ``/updateOne`` and ``/updateMany``."""

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_id: Optional[str] = Field(default=None, alias="upsertedId")


class DeleteOperation(BaseModel):
    """Result of ``/deleteOne`` and ``/deleteMany``."""

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)
    deleted_count: int = Field(alias="deletedCount")
