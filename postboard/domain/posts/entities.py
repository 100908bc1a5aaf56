# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from postboard.domain.exceptions import InvariantViolation

MESSAGE_MAX_LENGTH = 280

# Shared with the request DTO so both layers report the same text.
MESSAGE_EMPTY_TEXT = "message should not be empty"
MESSAGE_TOO_LONG_TEXT = f"message must be shorter than or equal to {MESSAGE_MAX_LENGTH} characters"


def validate_message(message: str) -> str:
    if not isinstance(message, str) or not message.strip():
        raise InvariantViolation(MESSAGE_EMPTY_TEXT, field="message")
    if len(message) > MESSAGE_MAX_LENGTH:
        raise InvariantViolation(MESSAGE_TOO_LONG_TEXT, field="message")
    return message


@dataclass(slots=True, frozen=True)
class Post:
    """Short text post. ``author_id`` is fixed at creation."""

    id: str
    message: str
    author_id: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        validate_message(self.message)
        if not self.author_id:
            raise InvariantViolation("post must have an author", field="author_id")
