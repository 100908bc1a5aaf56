# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth.entities import IssuedToken, RequestContext, TokenClaims
from .exceptions import InvariantViolation
from .posts.entities import MESSAGE_MAX_LENGTH, Post
from .users.entities import User

__all__ = [
    "IssuedToken",
    "InvariantViolation",
    "MESSAGE_MAX_LENGTH",
    "Post",
    "RequestContext",
    "TokenClaims",
    "User",
]
