from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from me_tool.models.base import Base

_IN_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


def normalize_database_url(raw_url: str) -> str:
    db_url = (raw_url or "").strip()
    if db_url.startswith("postgres://"):
        return db_url.replace("postgres://", "postgresql://", 1)
    return db_url


def build_engine(database_url: str) -> Engine:
    """Engine for the configured URL; SQLite connections may be shared across threads."""
    db_url = normalize_database_url(database_url)
    engine_kwargs = {}
    if db_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if db_url in _IN_MEMORY_URLS:
            engine_kwargs["poolclass"] = StaticPool
    return create_engine(db_url, **engine_kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False)


def init_db(engine: Engine) -> None:
    import me_tool.models  # noqa: F401  registers every table on Base.metadata

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = ["Base", "build_engine", "build_session_factory", "get_db", "init_db"]
