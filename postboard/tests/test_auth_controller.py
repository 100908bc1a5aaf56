from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from postboard.application.use_cases.auth.login_user import LoginUserUseCase
from postboard.domain.auth.entities import IssuedToken
from postboard.domain.auth.exceptions import InvalidCredentialsError, UnauthenticatedError
from postboard.domain.users.entities import User
from postboard.domain.users.exceptions import UserNotFoundError
from postboard.interfaces.http.auth import IdentityGuard
from postboard.interfaces.http.controllers.auth_controller import AuthController
from postboard.interfaces.http.controllers.posts_controller import PostsController
from postboard.shared.config import AppConfig
from postboard.shared.middleware.error_handler import configure_error_handling

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
ALICE = User(
    id="user-1",
    email="alice@email.com",
    password_hash="hash",
    created_at=NOW,
    updated_at=NOW,
    post_ids=("post-1",),
)


class StubResolver:
    def execute(self, token: str | None) -> User:
        if token != "good-token":
            raise UnauthenticatedError()
        return ALICE


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


@pytest.fixture()
def guard() -> IdentityGuard:
    return IdentityGuard(resolver=StubResolver())


def _controller(guard: IdentityGuard, login=None, profile=None) -> AuthController:
    return AuthController(
        login_use_case=login or MagicMock(),
        get_profile_use_case=profile or MagicMock(),
        guard=guard,
        config=AppConfig(),
    )


def test_login_sets_http_only_secure_cookie(flask_app: Flask, guard: IdentityGuard) -> None:
    login_called: dict[str, tuple[str, str]] = {}

    class StubLogin:
        def execute(self, email: str, password: str) -> IssuedToken:
            login_called["args"] = (email, password)
            return IssuedToken(
                token="token123",
                user_id=ALICE.id,
                issued_at=NOW,
                expires_at=NOW + timedelta(seconds=300),
            )

    controller = _controller(guard, login=cast(LoginUserUseCase, StubLogin()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"email": "alice@email.com", "password": "test123"})

    assert response.status_code == 200
    assert response.get_data(as_text=True) == ""
    assert login_called["args"] == ("alice@email.com", "test123")
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("access_token=token123")
    assert "HttpOnly" in cookie
    assert "Secure" in cookie
    assert "Max-Age=300" in cookie


def test_login_invalid_payload_returns_400(flask_app: Flask, guard: IdentityGuard) -> None:
    login = MagicMock()
    flask_app.register_blueprint(_controller(guard, login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"email": "not-an-email"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["statusCode"] == 400
    assert "email must be an email" in payload["message"]
    assert "password should not be empty" in payload["message"]
    login.execute.assert_not_called()


@pytest.mark.parametrize(
    ("error", "status", "message"),
    [
        (UserNotFoundError(), 404, "User not found."),
        (InvalidCredentialsError(), 401, "Invalid password."),
    ],
)
def test_login_failures_map_to_status(
    flask_app: Flask, guard: IdentityGuard, error, status: int, message: str
) -> None:
    login = MagicMock()
    login.execute.side_effect = error
    flask_app.register_blueprint(_controller(guard, login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"email": "alice@email.com", "password": "x"})

    assert response.status_code == status
    assert response.get_json()["message"] == message
    assert "Set-Cookie" not in response.headers


def test_current_user_requires_cookie(flask_app: Flask, guard: IdentityGuard) -> None:
    profile = MagicMock()
    flask_app.register_blueprint(_controller(guard, profile=profile).as_blueprint())

    with flask_app.test_client(use_cookies=False) as client:
        missing = client.get("/user")
        rejected = client.get("/user", headers={"Cookie": "access_token=forged"})

    assert missing.status_code == 401
    assert missing.get_json() == {
        "error": "unauthorized",
        "statusCode": 401,
        "message": "Unauthorized",
    }
    assert rejected.status_code == 401
    assert rejected.get_json() == missing.get_json()
    profile.execute.assert_not_called()


def test_current_user_receives_request_context(flask_app: Flask, guard: IdentityGuard) -> None:
    profile = MagicMock()
    profile.execute.return_value = ALICE
    flask_app.register_blueprint(_controller(guard, profile=profile).as_blueprint())

    with flask_app.test_client(use_cookies=False) as client:
        response = client.get("/user", headers={"Cookie": "access_token=good-token"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == ALICE.id
    assert body["email"] == ALICE.email
    assert body["posts"] == [{"id": "post-1"}]
    assert "password" not in body and "passwordHash" not in body
    ctx = profile.execute.call_args.args[0]
    assert ctx.user is ALICE


def test_posts_routes_are_protected(flask_app: Flask, guard: IdentityGuard) -> None:
    create, get, listing = MagicMock(), MagicMock(), MagicMock()
    controller = PostsController(
        create_use_case=create, get_use_case=get, list_use_case=listing, guard=guard
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client(use_cookies=False) as client:
        responses = [
            client.get("/posts"),
            client.post("/posts", json={"message": "hi"}),
            client.get("/posts/some-id"),
        ]

    assert [r.status_code for r in responses] == [401, 401, 401]
    create.execute.assert_not_called()
    get.execute.assert_not_called()
    listing.execute.assert_not_called()
