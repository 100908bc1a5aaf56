# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import (
    ENGINE,
    Base,
    SessionLocal,
    bind_engine,
    get_engine,
    init_db,
    session_scope,
)

__all__ = [
    "Base",
    "ENGINE",
    "SessionLocal",
    "bind_engine",
    "get_engine",
    "init_db",
    "session_scope",
]
