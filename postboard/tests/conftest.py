from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Must run before any postboard module reads the cached config.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="postboard-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP_DIR / 'test.db'}")
os.environ.setdefault("JWT_SECRET", "test-signing-secret-with-at-least-32-bytes!")
os.environ.setdefault("LOG_FILE", str(_TMP_DIR / "app.log"))
os.environ.setdefault("APP_ENV", "test")

from dataclasses import replace  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402

from postboard.domain.posts.entities import Post  # noqa: E402
from postboard.domain.posts.repositories import PostRepository  # noqa: E402
from postboard.domain.users.entities import User  # noqa: E402
from postboard.domain.users.exceptions import UserAlreadyExistsError  # noqa: E402
from postboard.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._posts: PostRepository | None = None

    def attach_posts(self, posts: PostRepository) -> None:
        self._posts = posts

    def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def find_by_id(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        if user is None or self._posts is None:
            return user
        post_ids = tuple(post.id for post in self._posts.find_many_by_author(user_id))
        return replace(user, post_ids=post_ids)

    def add(self, email: str, password_hash: str) -> User:
        if self.find_by_email(email) is not None:
            raise UserAlreadyExistsError()
        now = datetime.now(UTC)
        user = User(
            id=str(uuid4()),
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self._users[user.id] = user
        return user

    def delete(self, user_id: str) -> None:
        self._users.pop(user_id, None)

    def count(self) -> int:
        return len(self._users)


class InMemoryPostRepository(PostRepository):
    def __init__(self) -> None:
        self._posts: list[Post] = []

    def add(self, message: str, author_id: str) -> Post:
        now = datetime.now(UTC)
        post = Post(
            id=str(uuid4()),
            message=message,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )
        self._posts.append(post)
        return post

    def find_by_id(self, post_id: str) -> Post | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def find_many_by_author(self, author_id: str) -> list[Post]:
        return [post for post in self._posts if post.author_id == author_id]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FrozenClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def posts(users: InMemoryUserRepository) -> InMemoryPostRepository:
    repo = InMemoryPostRepository()
    users.attach_posts(repo)
    return repo


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC))
