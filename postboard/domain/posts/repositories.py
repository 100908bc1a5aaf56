# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post


class PostRepository(Protocol):
    def add(self, message: str, author_id: str) -> Post: ...
    def find_by_id(self, post_id: str) -> Post | None: ...
    def find_many_by_author(self, author_id: str) -> Sequence[Post]: ...
