from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from parts_market.domain.errors import ConflictError
from parts_market.infra.db.config import database_url, pool_settings

logger = logging.getLogger(__name__)

# Created on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Total max connections = pool size + max overflow (see PoolSettings).
    Connections are health-checked on checkout and recycled periodically.
    """
    global _engine
    if _engine is None:
        pool = pool_settings()
        _engine = create_engine(
            database_url(),
            pool_size=pool.size,
            max_overflow=pool.max_overflow,
            pool_pre_ping=True,
            pool_recycle=pool.recycle_seconds,
        )
        logger.info(
            "Database engine created",
            extra={"pool_size": pool.size, "max_overflow": pool.max_overflow},
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Unit of work: commit on success, roll back on any exception."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def integrity_errors_as_conflict(message: str, **context: Any) -> Iterator[None]:
    """
    Surface constraint violations raised inside the block as ConflictError.

    The session is left for get_session() to roll back.
    """
    try:
        yield
    except IntegrityError as exc:
        logger.info(
            "Integrity violation",
            extra={"error_message": message, "db_error": str(exc.orig), **context},
        )
        raise ConflictError(message, **context) from exc
