"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine, StaticPool, event, text
from sqlmodel import Session, create_engine

from src.app.runtime.config.config_data import DatabaseConfig


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig):
        """Initialize the shared database engine from an explicit configuration."""

        logger.info("Setting up database engine and session factory")
        self._config = db_config

        engine_kwargs = {
            "echo": db_config.echo,
            "echo_pool": False,
            "connect_args": {
                "check_same_thread": False,  # Sessions are used from the threadpool
                "timeout": db_config.pool_timeout,  # Lock timeout
            },
        }

        if db_config.is_memory:
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        else:
            db_config.ensure_parent_dir()

        logger.info(
            "Initializing database engine using connection string: {}",
            db_config.connection_string,
        )
        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,  # Auto-flush before queries
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for repositories and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            # Log database errors for monitoring
            logger.error(
                "Database transaction failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
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
            logger.error(
                "Database health check failed",
                extra={
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database engine disposed")
