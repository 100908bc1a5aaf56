# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:
    """Registered account. ``password_hash`` never leaves the service layer."""

    id: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime
    post_ids: tuple[str, ...] = ()
