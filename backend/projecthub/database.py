# backend/projecthub/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .utils.logging import db_logger

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    db_logger.info(f"Connecting to database: {database_url}")

    is_sqlite = database_url.startswith("sqlite")
    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False} if is_sqlite else {},
        echo=False  # This will log all SQL statements
    )
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_sessionmaker(engine: Engine) -> sessionmaker:
    # Rows handed out by the store outlive their session
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
