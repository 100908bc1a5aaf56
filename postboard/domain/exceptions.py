# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class InvariantViolation(ValueError):
    """An entity was asked to hold a value its rules forbid."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field
