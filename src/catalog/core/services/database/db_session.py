"""Database engine and session factory used by the SQL product store."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.runtime.config.config_data import DatabaseConfig
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None):
        """Initialize the shared database engine and session factory."""
        main_config = get_config()
        self._config = db_config or main_config.database

        engine_kwargs = self._get_engine_kwargs(main_config.app.environment)
        logger.info(
            "Initializing database engine for {} (environment: {})",
            self._config.url,
            main_config.app.environment,
        )
        self._engine = create_engine(self._config.url, **engine_kwargs)

    def _get_engine_kwargs(self, environment: str) -> dict[str, Any]:
        """Get database-specific engine arguments."""
        kwargs: dict[str, Any] = {"echo": self._config.echo}

        if self._config.is_sqlite:
            # Sync endpoints run in a threadpool
            kwargs["connect_args"] = {"check_same_thread": False, "timeout": 20}
            if ":memory:" in self._config.url:
                # One shared connection, otherwise every checkout sees an empty database
                kwargs["poolclass"] = StaticPool
            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
            return kwargs

        kwargs.update(
            {
                "pool_size": self._config.pool_size,
                "max_overflow": self._config.max_overflow,
                "pool_timeout": self._config.pool_timeout,
                "pool_recycle": self._config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        return kwargs

    @property
    def engine(self):
        return self._engine

    def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.service.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Run a unit of work in one transaction, rolling back on any error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).debug(
                "Database transaction rolled back: {}", e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}", e)
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
