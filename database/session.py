import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

import core.config as config
from database.base import Base

log = logging.getLogger("database")


def build_engine(url: str) -> Engine:
    engine_kwargs = {"echo": config.SQL_ECHO, "pool_pre_ping": True}
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    engine = create_engine(url, **engine_kwargs)

    if is_sqlite:
        # sqlite ignores REFERENCES unless asked per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the customers/addresses tables if they are missing."""
    import models  # noqa: F401  registers every table on Base.metadata

    Base.metadata.create_all(bind=engine)
    log.info("schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


def get_db(request: Request):
    db: Session = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()
