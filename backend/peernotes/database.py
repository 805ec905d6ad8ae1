"""SQLAlchemy engine, session factory and the request-scoped session dependency."""

from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from peernotes.config import settings
from peernotes.exceptions import StorageUnavailable

Base = declarative_base()


def build_engine(url: str, ssl: bool = False) -> Optional[Engine]:
    url = str(url or "").strip()
    if not url:
        return None
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    elif ssl:
        connect_args["sslmode"] = "require"
    built = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
    if url.startswith("sqlite"):
        # SQLite ignores ON DELETE CASCADE unless enabled per connection.
        event.listen(built, "connect", _enable_sqlite_foreign_keys)
    return built


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.DATABASE_URL, settings.DATABASE_SSL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine) if engine is not None else None


def get_db():
    if SessionLocal is None:
        raise StorageUnavailable()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
