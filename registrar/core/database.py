"""Engine and session factory setup using SQLAlchemy."""
import logging
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from registrar.core.config import settings

logger = logging.getLogger(__name__)


def create_db_engine(url: str = None, **overrides) -> Engine:
    """Build the process-wide pooled engine."""
    url = url or settings.DATABASE_URL
    options = {
        "pool_pre_ping": True,
        "echo": settings.DB_ECHO,
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    options.update(overrides)
    return create_engine(url, **options)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
    )


def check_connection(engine: Engine) -> bool:
    """Run a trivial query to confirm the database is reachable"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return False


def get_session_factory(request: Request) -> sessionmaker:
    return request.app.state.session_factory
