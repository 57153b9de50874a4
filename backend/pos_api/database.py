from threading import Lock
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .config import settings

Base = declarative_base()

_engine_lock = Lock()
_engine = None
_session_local = None
_current_database_url = ""


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def _is_sqlite_memory(database_url: str) -> bool:
    return database_url in {"sqlite://", "sqlite:///:memory:"} or ":memory:" in database_url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(database_url: str):
    kwargs = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
    if _is_sqlite(database_url):
        # FastAPI ejecuta endpoints sync en un threadpool.
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory(database_url):
            kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, **kwargs)
    if _is_sqlite(database_url):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def refresh_engine(database_url: Optional[str] = None, force: bool = False):
    global _engine, _session_local, _current_database_url

    target_database_url = database_url or _current_database_url or settings.DATABASE_URL
    with _engine_lock:
        if not force and _engine is not None and target_database_url == _current_database_url:
            return _engine

        if _engine is not None:
            _engine.dispose()

        _engine = _build_engine(target_database_url)
        _session_local = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
        _current_database_url = target_database_url
        return _engine


def get_engine():
    return refresh_engine(force=False)


def get_session_local():
    refresh_engine(force=False)
    return _session_local


def get_current_database_url() -> str:
    refresh_engine(force=False)
    return _current_database_url
