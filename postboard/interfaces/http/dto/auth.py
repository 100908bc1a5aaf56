from __future__ import annotations

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from postboard.shared.errors.validation_types import ValidationErrorType

from ._fields import check_email


class LoginRequestDTO(BaseModel):
    email: str
    password: str  # No strength check on login

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
        return value
