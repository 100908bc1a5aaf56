from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from postboard.domain.posts.entities import (
    MESSAGE_EMPTY_TEXT,
    MESSAGE_MAX_LENGTH,
    MESSAGE_TOO_LONG_TEXT,
    Post,
)
from postboard.shared.errors.validation_types import ValidationErrorType


class CreatePostRequestDTO(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.MESSAGE_EMPTY,
                MESSAGE_EMPTY_TEXT,
                {},
            )
        if len(value) > MESSAGE_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.MESSAGE_TOO_LONG,
                MESSAGE_TOO_LONG_TEXT,
                {"max_length": MESSAGE_MAX_LENGTH},
            )
        return value


class PublicPostDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)

    id: str
    message: str
    author: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> PublicPostDTO:
        return cls(
            id=post.id,
            message=post.message,
            author=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
