# FILE: specforge/db.py
"""
Database engine and session lifecycle.

The engine is a process-scoped singleton: init_engine() on startup,
dispose_engine() on shutdown. Request handlers get a session through the
get_db() dependency.
"""
import logging
import os
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()

SessionLocal = sessionmaker(autocommit=False, autoflush=False)

_engine: Optional[Engine] = None


def init_engine(database_url: str, **kwargs) -> Engine:
    """Create the engine and bind the session factory to it."""
    global _engine

    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        kwargs.setdefault("connect_args", {"check_same_thread": False})  # Required for SQLite
        if url.database and url.database != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)

    _engine = create_engine(database_url, echo=False, **kwargs)
    SessionLocal.configure(bind=_engine)
    logger.info("[db] engine initialised (%s)", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database engine not initialised; call init_engine() first")
    return _engine


def get_db():
    """FastAPI dependency that yields a DB session and closes it after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables. Call once at startup."""
    # Import models so Base.metadata knows about them
    from specforge.specs import models  # noqa: F401
    Base.metadata.create_all(bind=get_engine())


def check_db_health() -> bool:
    """Trivial round-trip query. Never raises."""
    try:
        with get_engine().connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error("[db] health check failed: %s", e)
        return False


def dispose_engine() -> None:
    global _engine
    if _engine is not None:
        _engine.dispose()
        logger.info("[db] engine disposed")
    _engine = None
