# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from postboard.shared.config import DatabaseConfig, load_config
from postboard.shared.errors import InfrastructureError
from postboard.shared.logging import logger

_SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL;",
    "PRAGMA foreign_keys=ON;",
    "PRAGMA busy_timeout=30000;",
)


class Base(DeclarativeBase):
    pass


def _engine_options(database: DatabaseConfig) -> dict[str, Any]:
    options: dict[str, Any] = {"future": True, "pool_pre_ping": True}
    url = make_url(database.url)
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=database.pool_size,
            max_overflow=database.max_overflow,
            pool_timeout=database.pool_timeout,
        )
        return options

    # Flask serves requests from threads other than the one that opened the file
    options["connect_args"] = {
        "check_same_thread": False,
        "timeout": int(database.pool_timeout),
    }
    return options


def _build_engine(database: DatabaseConfig) -> Engine:
    engine = create_engine(database.url, **_engine_options(database))

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _apply_sqlite_pragmas(dbapi_conn, _record) -> None:
            cursor = dbapi_conn.cursor()
            try:
                for pragma in _SQLITE_PRAGMAS:
                    cursor.execute(pragma)
            finally:
                cursor.close()

    return engine


ENGINE: Engine = _build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """One unit of work: commit on success, roll back on any error.

    A lost connection surfaces as ``InfrastructureError``; constraint
    violations propagate unchanged so repositories can translate them.
    """

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except OperationalError as exc:
        session.rollback()
        logger.error(f"db.session: operational error, rolled back ({exc.__class__.__name__})")
        raise InfrastructureError("database_unavailable") from exc
    except Exception as exc:
        session.rollback()
        logger.warning(f"db.session: rolled back after {type(exc).__name__}")
        raise
    finally:
        session.close()
        SessionLocal.remove()


def get_engine() -> Engine:
    return ENGINE


def bind_engine(database: DatabaseConfig) -> Engine:
    """Point ``SessionLocal`` at ``database.url``, rebuilding the engine if needed."""

    global ENGINE
    if ENGINE.url.render_as_string(hide_password=False) == make_url(database.url).render_as_string(
        hide_password=False
    ):
        return ENGINE

    previous = ENGINE
    ENGINE = _build_engine(database)
    SessionLocal.remove()
    SessionLocal.configure(bind=ENGINE)
    previous.dispose()
    logger.info(f"db: engine rebound to {ENGINE.url.render_as_string(hide_password=True)}")
    return ENGINE


def init_db(database: DatabaseConfig | None = None) -> None:
    from postboard.infrastructure.db import models  # noqa: F401  (registers tables)

    engine = bind_engine(database) if database is not None else ENGINE
    Base.metadata.create_all(bind=engine)
    logger.info(f"db: schema ensured on {engine.dialect.name}")
