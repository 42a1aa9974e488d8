"""
Database configuration and connection management.

Engine and session factory built from application settings.
"""

import logging
import time
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .config import settings
from .models import Base

logger = logging.getLogger(__name__)

QUERY_LOGGING_THRESHOLD_MS = 100


def get_database_url() -> str:
    """
    Get database URL from settings.

    Returns:
        Database connection URL
    """
    db_url = settings.DATABASE_URL

    # Sanitize for logging
    if "@" in db_url:
        safe_url = db_url.split("@")[0].rsplit(":", 1)[0] + ":***@..."
    else:
        safe_url = db_url

    logger.info(f"Using database: {safe_url}")
    return db_url


def get_engine_kwargs(db_url: str) -> dict:
    """
    Get database-specific engine arguments.

    SQLite does not support connection pool sizing, so pool settings
    only apply to server databases.

    Args:
        db_url: Database connection URL

    Returns:
        Keyword arguments for create_engine
    """
    if db_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "echo": settings.DATABASE_ECHO}
    return {
        "pool_pre_ping": settings.DATABASE_POOL_PRE_PING,
        "pool_recycle": settings.DATABASE_POOL_RECYCLE,
        "pool_size": settings.DATABASE_POOL_SIZE,
        "max_overflow": settings.DATABASE_MAX_OVERFLOW,
        "echo": settings.DATABASE_ECHO,
    }


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Track query start time."""
    conn.info.setdefault("query_start_time", []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log slow queries."""
    total_time_ms = (time.time() - conn.info["query_start_time"].pop()) * 1000

    if total_time_ms > QUERY_LOGGING_THRESHOLD_MS:
        logger.warning(
            f"Slow query detected: {total_time_ms:.2f}ms",
            extra={"query_time_ms": total_time_ms, "statement": statement[:200]},
        )


db_url = get_database_url()
engine = create_engine(db_url, **get_engine_kwargs(db_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """
    Initialize database tables.

    Creates all tables on application startup.
    Uses checkfirst=True to safely handle existing tables.
    """
    try:
        logger.info("Initializing database tables...")
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def get_db() -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        SQLAlchemy database session, closed when the request ends
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connection(db: Session) -> bool:
    """
    Check that the database answers a trivial query.

    Args:
        db: Database session

    Returns:
        True if the database is reachable
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.warning(f"Database connectivity check failed: {e}")
        return False
