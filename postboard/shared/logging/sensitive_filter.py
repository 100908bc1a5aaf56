# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any, NamedTuple

REDACTED = "***REDACTED***"


class _Rule(NamedTuple):
    pattern: re.Pattern[str]
    replacement: str


def _rule(pattern: str, replacement: str) -> _Rule:
    return _Rule(re.compile(pattern, re.IGNORECASE), replacement)


# Order matters: whole JWTs are masked before the generic key=value rules run.
_RULES: tuple[_Rule, ...] = (
    _rule(r"eyJ[\w-]+\.[\w-]+\.[\w-]+", "***JWT***"),
    _rule(r"((?:secret[_-]?key|jwt[_-]?secret)\s*[:=]\s*['\"]?)[^'\"\s,]+", rf"\1{REDACTED}"),
    _rule(r"((?:access[_-]?)?token\s*[:=]\s*['\"]?)[\w.-]{16,}", rf"\1{REDACTED}"),
    _rule(r"(bearer\s+)[\w.-]{16,}", rf"\1{REDACTED}"),
    _rule(r"((?:password|pwd)(?:[_-]?hash)?['\"]?\s*[:=]\s*['\"]?)[^'\"\s,}]+", rf"\1{REDACTED}"),
    _rule(r"((?:cookie|authorization)\s*:\s*['\"]?)[^'\"\n]+", rf"\1{REDACTED}"),
    _rule(r"(\w+(?:\+\w+)?://[^:/\s]+:)[^@\s]+@", rf"\1{REDACTED}@"),
    _rule(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-z]{2,})", r"***@\1"),
)


def sanitize_message(message: str) -> str:
    for rule in _RULES:
        message = rule.pattern.sub(rule.replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> None:
    """Loguru patcher: rewrites ``record["message"]`` in place."""

    record["message"] = sanitize_message(record["message"])
