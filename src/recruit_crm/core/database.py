"""Database connection and session management with connection pooling."""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from .base import Base
import structlog

logger = structlog.get_logger(__name__)


class DatabaseManager:
    """Manages database connections with connection pooling."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize database manager.

        Args:
            database_url: SQLAlchemy connection URL
            echo: Echo SQL statements to the log
        """
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def initialize(self) -> None:
        """Initialize database engine with connection pooling."""
        if self.engine is not None:
            logger.warning("Database engine already initialized")
            return

        if self.is_sqlite:
            # SQLite connections are shared across the threadpool FastAPI runs sync handlers in
            self.engine = create_engine(
                self.database_url,
                connect_args={"check_same_thread": False},
                echo=self.echo,
            )
        else:
            self.engine = create_engine(
                self.database_url,
                poolclass=QueuePool,
                pool_size=10,
                max_overflow=20,
                pool_timeout=30,
                pool_recycle=3600,
                pool_pre_ping=True,
                echo=self.echo,
            )

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        logger.info(
            "Database engine initialized",
            dialect=self.engine.dialect.name,
        )

    def close(self) -> None:
        """Close database engine and dispose of connection pool."""
        if self.engine:
            self.engine.dispose()
            logger.info("Database engine closed")
            self.engine = None
            self.SessionLocal = None

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get database session with automatic cleanup.

        Yields:
            Database session

        Raises:
            RuntimeError: If database is not initialized
        """
        if self.SessionLocal is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create all database tables."""
        if self.engine is None:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def health_check(self) -> bool:
        """Check database connectivity.

        Returns:
            True if database is accessible, False otherwise
        """
        try:
            if self.engine is None:
                return False

            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return False
