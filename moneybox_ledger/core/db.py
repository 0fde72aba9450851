from __future__ import annotations

from typing import Any, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata
from .config import Settings, get_settings


_engine: Optional[Engine] = None


def create_engine_for_url(database_url: str) -> Engine:
    connect_args: dict[str, Any] = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    return create_engine(database_url, echo=False, connect_args=connect_args)


def get_engine(settings: Optional[Settings] = None) -> Engine:
    """Return the shared engine, creating it from settings on first use."""
    global _engine
    if _engine is None:
        _engine = create_engine_for_url((settings or get_settings()).database_url)
        SQLModel.metadata.create_all(_engine)
    return _engine


def set_engine(new_engine: Optional[Engine]) -> None:
    """Swap the shared engine; ``None`` makes the next call rebuild it."""
    global _engine
    _engine = new_engine


def open_session(settings: Optional[Settings] = None) -> Session:
    return Session(get_engine(settings))
