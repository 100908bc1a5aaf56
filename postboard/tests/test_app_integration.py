from __future__ import annotations

import jwt
import pytest
from sqlalchemy import func, select

from postboard.app import create_app
from postboard.infrastructure.db import Base, SessionLocal, get_engine, init_db
from postboard.infrastructure.db import models
from postboard.shared.config import AppConfig, DatabaseConfig, SecurityConfig, load_config

EMAIL = "test@email.com"
PASSWORD = "test123"


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=get_engine())
    Base.metadata.create_all(bind=get_engine())
    yield
    Base.metadata.drop_all(bind=get_engine())


@pytest.fixture()
def client():
    app = create_app()
    with app.test_client(use_cookies=False) as client:
        yield client


def _login(client, path: str = "/login") -> str:
    response = client.post(path, json={"email": EMAIL, "password": PASSWORD})
    assert response.status_code == 200
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("access_token=")
    return cookie.split(";", 1)[0].split("=", 1)[1]


def _auth(token: str) -> dict[str, str]:
    return {"Cookie": f"access_token={token}"}


def test_signup_login_and_post_flow(client) -> None:
    signup = client.post("/users", json={"email": EMAIL, "password": PASSWORD})
    assert signup.status_code == 201
    user = signup.get_json()
    assert user["email"] == EMAIL
    assert user["posts"] == []
    assert "password" not in user and "passwordHash" not in user

    token = _login(client)
    claims = jwt.decode(token, load_config().token_secret(), algorithms=["HS256"])
    assert claims["id"] == user["id"]
    assert claims["exp"] - claims["iat"] == 300

    assert client.get("/user").status_code == 401

    listing = client.get("/posts", headers=_auth(token))
    assert listing.status_code == 200
    assert listing.get_json() == []

    too_long = client.post("/posts", json={"message": "x" * 281}, headers=_auth(token))
    assert too_long.status_code == 400
    assert too_long.get_json()["message"] == [
        "message must be shorter than or equal to 280 characters"
    ]

    created = client.post("/posts", json={"message": "x" * 280}, headers=_auth(token))
    assert created.status_code == 201
    post = created.get_json()
    assert post["author"] == user["id"]

    fetched = client.get(f"/posts/{post['id']}", headers=_auth(token))
    assert fetched.status_code == 200
    assert fetched.get_json() == post

    profile = client.get("/user", headers=_auth(token))
    assert profile.status_code == 200
    assert profile.get_json()["posts"] == [{"id": post["id"]}]


def test_duplicate_signup_keeps_single_record(client) -> None:
    assert client.post("/users", json={"email": EMAIL, "password": PASSWORD}).status_code == 201

    duplicate = client.post("/users", json={"email": EMAIL, "password": "another1"})

    assert duplicate.status_code == 400
    assert duplicate.get_json()["message"] == "User already exists."
    session = SessionLocal()
    try:
        count = session.scalar(
            select(func.count()).select_from(models.User).where(models.User.email == EMAIL)
        )
        assert count == 1
    finally:
        session.close()


def test_login_failures(client) -> None:
    client.post("/users", json={"email": EMAIL, "password": PASSWORD})

    unknown = client.post("/login", json={"email": "nobody@email.com", "password": PASSWORD})
    wrong = client.post("/login", json={"email": EMAIL, "password": "wrong-password"})

    assert unknown.status_code == 404
    assert unknown.get_json()["message"] == "User not found."
    assert wrong.status_code == 401
    assert wrong.get_json()["message"] == "Invalid password."
    assert "Set-Cookie" not in wrong.headers


def test_auth_prefixed_routes(client) -> None:
    client.post("/users", json={"email": EMAIL, "password": PASSWORD})

    token = _login(client, "/auth/login")

    assert client.get("/auth/user", headers=_auth(token)).get_json()["email"] == EMAIL


def test_missing_post_and_foreign_listing(client) -> None:
    client.post("/users", json={"email": EMAIL, "password": PASSWORD})
    client.post("/users", json={"email": "other@email.com", "password": PASSWORD})
    token = _login(client)
    created = client.post("/posts", json={"message": "mine"}, headers=_auth(token)).get_json()

    other = client.post("/login", json={"email": "other@email.com", "password": PASSWORD})
    other_token = other.headers["Set-Cookie"].split(";", 1)[0].split("=", 1)[1]

    assert client.get("/posts", headers=_auth(other_token)).get_json() == []
    assert client.get(f"/posts/{created['id']}", headers=_auth(other_token)).status_code == 200

    missing = client.get(
        "/posts/00000000-0000-0000-0000-000000000000", headers=_auth(token)
    )
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "Post not found."


def test_tampered_cookie_is_rejected(client) -> None:
    client.post("/users", json={"email": EMAIL, "password": PASSWORD})
    token = _login(client)
    header, payload, signature = token.split(".")
    forged = ".".join((header, payload, signature[::-1]))

    assert client.get("/posts", headers=_auth(forged)).status_code == 401


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}


def test_unknown_route_returns_json(client) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["statusCode"] == 404


def test_request_id_is_echoed_with_security_headers(client) -> None:
    response = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_explicit_config_reaches_every_layer(tmp_path) -> None:
    db_file = tmp_path / "explicit.db"
    config = AppConfig(
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{db_file}"),
        security=SecurityConfig(ENABLE_HSTS=True, ALLOWED_ORIGINS="https://a.example"),
    )
    try:
        app = create_app(config=config)
        with app.test_client(use_cookies=False) as client:
            response = client.get("/health", headers={"Origin": "https://a.example"})
            signup = client.post("/users", json={"email": EMAIL, "password": PASSWORD})

        assert response.status_code == 200
        assert response.headers["Access-Control-Allow-Origin"] == "https://a.example"
        assert response.headers["Strict-Transport-Security"].startswith("max-age=")
        assert signup.status_code == 201
        assert get_engine().url.database == str(db_file)
        assert db_file.exists()
    finally:
        init_db(load_config().database)


def test_default_config_sends_no_hsts(client) -> None:
    assert "Strict-Transport-Security" not in client.get("/health").headers
