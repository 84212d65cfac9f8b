"""
RecipeGen Database Configuration
PostgreSQL database setup with SQLAlchemy 2.0
"""

from sqlalchemy import create_engine, MetaData, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from contextlib import contextmanager
import structlog
from typing import Generator, Optional

from core.config import settings

logger = structlog.get_logger()

# Database engine
engine: Optional[Engine] = None
session_factory: Optional[sessionmaker] = None


class Base(DeclarativeBase):
    """Base class for all database models"""

    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s"
        }
    )


def init_db(database_url: Optional[str] = None) -> None:
    """Initialize database connection and create tables"""
    global engine, session_factory

    url = database_url or settings.database_url
    try:
        engine_options = {"pool_pre_ping": True, "echo": settings.DEBUG}
        if not url.startswith("sqlite"):
            engine_options.update(
                pool_size=settings.DATABASE_POOL_SIZE,
                max_overflow=settings.DATABASE_MAX_OVERFLOW,
                pool_timeout=settings.DATABASE_POOL_TIMEOUT,
                pool_recycle=3600,
            )
        engine = create_engine(url, **engine_options)

        session_factory = sessionmaker(
            bind=engine,
            expire_on_commit=False,
            autoflush=False,
        )

        if settings.DB_AUTO_MIGRATE:
            # Models must be registered on Base.metadata before create_all
            import models  # noqa: F401
            Base.metadata.create_all(bind=engine)

        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        logger.info("Database connection initialized successfully")

    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise


def close_db() -> None:
    """Close database connections"""
    global engine

    if engine:
        engine.dispose()
        logger.info("Database connections closed")


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """
    Context manager for database sessions
    Rolls back on error and always closes the session; services commit explicitly
    """
    if not session_factory:
        raise RuntimeError("Database not initialized. Call init_db() first.")

    session = session_factory()
    try:
        yield session
    except Exception as e:
        session.rollback()
        logger.error("Database session error", error=str(e))
        raise
    finally:
        session.close()


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI to get database session
    """
    with get_db_session() as session:
        yield session


class DatabaseHealthCheck:
    """Database health check utilities"""

    @staticmethod
    def check_connection(session: Session) -> bool:
        """Check if database connection is healthy"""
        try:
            result = session.execute(text("SELECT 1"))
            return result.scalar() == 1
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return False

    @staticmethod
    def get_connection_info() -> dict:
        """Get database connection pool information"""
        if not engine:
            return {"status": "not_initialized"}

        pool = engine.pool
        info = {"status": "healthy", "pool": type(pool).__name__}
        if hasattr(pool, "checkedout"):
            info.update(
                pool_size=pool.size(),
                checked_in=pool.checkedin(),
                checked_out=pool.checkedout(),
                overflow=pool.overflow(),
            )
        return info


# Export commonly used items
__all__ = [
    "Base",
    "engine",
    "session_factory",
    "init_db",
    "close_db",
    "get_db_session",
    "get_db",
    "DatabaseHealthCheck"
]
