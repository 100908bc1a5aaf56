# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    """Error that knows how it is rendered as an HTTP response.

    ``message`` is either a single sentence or one message per failing input
    field; ``context`` is optional structured detail for the client.
    """

    code: str
    status: HTTPStatus
    message: str | Sequence[str] | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        if self.message is None:
            message: str | list[str] = self.status.phrase
        elif isinstance(self.message, str):
            message = self.message
        else:
            message = list(self.message)

        payload: dict[str, Any] = {
            "error": self.code,
            "statusCode": int(self.status),
            "message": message,
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Base for business-rule failures.

    Subclasses declare their wire identity once, in the class statement::

        class PostNotFoundError(
            DomainError, code="post_not_found", status=HTTPStatus.NOT_FOUND
        ): ...
    """

    default_code: ClassVar[str] = "domain_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST
    default_message: ClassVar[str | None] = None

    def __init_subclass__(
        cls,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if code is not None:
            cls.default_code = code
        if status is not None:
            cls.default_status = status
        if message is not None:
            cls.default_message = message

    def __init__(
        self, message: str | None = None, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            code=self.default_code,
            status=self.default_status,
            message=message or self.default_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, status=HTTPStatus.INTERNAL_SERVER_ERROR, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        *,
        messages: Sequence[str] | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.BAD_REQUEST,
            message=list(messages or []),
            context=context,
        )
