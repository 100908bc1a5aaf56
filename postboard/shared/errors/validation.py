# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from .base import ValidationError

# Built-in pydantic error types reworded for clients; custom errors raised
# by the DTO validators already carry their final text.
_BUILTIN_MESSAGES = {
    "missing": "{field} should not be empty",
    "string_type": "{field} must be a string",
    "model_type": "request body must be a JSON object",
    "model_attributes_type": "request body must be a JSON object",
    "dict_type": "request body must be a JSON object",
}


def _field_name(error: ErrorDetails) -> str:
    return ".".join(str(part) for part in error["loc"])


def _client_message(error: ErrorDetails) -> str:
    template = _BUILTIN_MESSAGES.get(error["type"])
    if template is None:
        return error["msg"]
    return template.format(field=_field_name(error) or "body")


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Split a pydantic failure into client messages and per-field detail."""

    details = exc.errors(include_url=False, include_input=False)
    return {
        "fields": sorted({_field_name(error) for error in details if error["loc"]}),
        "errors": [
            {"field": _field_name(error) or "body", "type": error["type"]} for error in details
        ],
        "messages": [_client_message(error) for error in details],
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise ValidationError(messages=context.pop("messages"), context=context) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
