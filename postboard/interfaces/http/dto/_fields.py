from __future__ import annotations

import re

from pydantic_core import PydanticCustomError

from postboard.shared.errors.validation_types import ValidationErrorType

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_email(value: str) -> str:
    if not value:
        raise PydanticCustomError(
            ValidationErrorType.MISSING,
            "email should not be empty",
            {},
        )
    if not _EMAIL_RE.match(value):
        raise PydanticCustomError(
            ValidationErrorType.EMAIL_INVALID,
            "email must be an email",
            {},
        )
    return value
