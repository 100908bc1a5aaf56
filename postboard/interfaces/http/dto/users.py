from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from postboard.domain.users.entities import User
from postboard.shared.errors.validation_types import ValidationErrorType

from ._fields import check_email

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128


class SignupRequestDTO(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                ValidationErrorType.MISSING,
                "password should not be empty",
                {},
            )
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "password must be longer than or equal to 6 characters",
                {"min_length": PASSWORD_MIN_LENGTH},
            )
        if len(value) > PASSWORD_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_LONG,
                "password must be shorter than or equal to 128 characters",
                {"max_length": PASSWORD_MAX_LENGTH},
            )
        return value


class PostRefDTO(BaseModel):
    id: str


class PublicUserDTO(BaseModel):
    """Outward view of a user. There is deliberately no password field."""

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)

    id: str
    email: str
    created_at: datetime
    updated_at: datetime
    posts: list[PostRefDTO] = []

    @classmethod
    def from_entity(cls, user: User) -> PublicUserDTO:
        return cls(
            id=user.id,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
            posts=[PostRefDTO(id=post_id) for post_id in user.post_ids],
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
