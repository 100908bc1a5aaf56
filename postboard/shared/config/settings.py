# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_WEAK_SECRETS = frozenset({"", "dev", "development", "test", "secret", "changeme"})
_TRUTHY = ("1", "true", "yes", "on")

# Every section reads the same environment / .env file by alias.
_ENV = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)


def _as_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


class DatabaseConfig(BaseSettings):
    model_config = _ENV

    url: str = Field("sqlite:///postboard.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")


class AuthConfig(BaseSettings):
    model_config = _ENV

    # empty: fall back to SECRET_KEY
    jwt_secret: str = Field("", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_ttl_seconds: int = Field(300, ge=1, alias="ACCESS_TOKEN_TTL_SECONDS")
    cookie_name: str = Field("access_token", alias="ACCESS_TOKEN_COOKIE")


class SecurityConfig(BaseSettings):
    model_config = _ENV

    cookie_secure: bool = Field(True, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", "enable_hsts", mode="before")
    @classmethod
    def _parse_flag(cls, value: str | bool) -> bool:
        return _as_bool(value)


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
    )

    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _as_bool(value)

    @model_validator(mode="after")
    def _guard_production(self) -> AppConfig:
        if not self.is_production():
            return self

        # Runs before logging is configured, so problems go straight to stderr.
        if self.token_secret().strip().lower() in _WEAK_SECRETS:
            print(
                "\nFATAL: refusing to start in production with a weak token signing secret.\n"
                "   Set JWT_SECRET (or SECRET_KEY) to a long random value, e.g. the output of\n"
                '   python -c "import secrets; print(secrets.token_urlsafe(48))"\n',
                file=sys.stderr,
            )
            sys.exit(1)

        for warning in self.production_warnings():
            print(f"WARNING: {warning}", file=sys.stderr)
        return self

    def production_warnings(self) -> list[str]:
        warnings = []
        if not self.security.cookie_secure:
            warnings.append("COOKIE_SECURE is off; the access_token cookie can travel over plain HTTP")
        if "*" in self.security.allowed_origins:
            warnings.append("ALLOWED_ORIGINS contains '*'")
        if not self.security.enable_hsts:
            warnings.append("ENABLE_HSTS is off")
        return warnings

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def token_secret(self) -> str:
        return self.auth.jwt_secret or self.secret_key


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "AuthConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
