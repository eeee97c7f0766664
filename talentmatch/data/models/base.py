"""
Shared building blocks for the candidate and job documents.

Stored documents use camelCase keys and MongoDB ObjectIds; the models here
accept either alias or field name and render ids as plain strings.
"""

from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import core_schema


class PyObjectId(ObjectId):
    """ObjectId field type: accepts an ObjectId or its 24-char hex form."""

    @classmethod
    def __get_pydantic_core_schema__(cls, _source_type: Any, _handler: Any) -> Any:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def validate(cls, value: Any) -> ObjectId:
        if isinstance(value, ObjectId):
            return value
        if not (isinstance(value, str) and ObjectId.is_valid(value)):
            raise ValueError(f"Invalid ObjectId: {value}")
        return ObjectId(value)


class EmbeddedModel(BaseModel):
    """Subdocument stored inside a candidate or job."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class BaseDocument(EmbeddedModel):
    """
    Top-level document read from a collection.

    Keys the application does not model (``__v``, audit fields, ...) are
    dropped on validation.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    id: Optional[PyObjectId] = Field(default=None, alias="_id")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @property
    def id_str(self) -> Optional[str]:
        return None if self.id is None else str(self.id)


def none_as_empty_list(value: Any) -> Any:
    """Treat a stored null as an empty list."""
    return [] if value is None else value


def blank_as_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
