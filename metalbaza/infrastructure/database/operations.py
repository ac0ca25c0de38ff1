"""
Database engine and session management
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from metalbaza.infrastructure.configuration.config import Settings, get_config
from metalbaza.infrastructure.database.models import Base, CompanySettings
from metalbaza.infrastructure.logging.logging_config import PerformanceLogger
from metalbaza.infrastructure.utilities.constants import DatabaseSettings, PerformanceSettings
from metalbaza.infrastructure.utilities.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine and the session factory"""

    def __init__(self, config: Optional[Settings] = None, database_url: Optional[str] = None):
        """Initialize database manager with configuration"""
        self.config = config or get_config()
        self.database_url = database_url or self.config.database_url
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create database engine with environment-specific settings"""
        engine_kwargs: Dict[str, Any] = {
            "pool_pre_ping": True,
            "echo": False,
        }

        if self.is_sqlite:
            self._ensure_sqlite_directory()
            engine_kwargs.update({
                "poolclass": StaticPool,
                "connect_args": {
                    "check_same_thread": False,
                    "timeout": DatabaseSettings.CONNECTION_TIMEOUT_SECONDS,
                },
            })
        elif self.config.environment == "production":
            engine_kwargs.update({
                "pool_size": DatabaseSettings.PRODUCTION_POOL_SIZE,
                "max_overflow": DatabaseSettings.PRODUCTION_MAX_OVERFLOW,
                "pool_recycle": DatabaseSettings.POOL_RECYCLE_SECONDS,
            })
        else:
            engine_kwargs.update({
                "pool_size": DatabaseSettings.DEVELOPMENT_POOL_SIZE,
                "max_overflow": DatabaseSettings.DEVELOPMENT_MAX_OVERFLOW,
                "pool_recycle": DatabaseSettings.POOL_RECYCLE_SECONDS,
            })

        engine = create_engine(self.database_url, **engine_kwargs)
        self._setup_engine_events(engine)
        return engine

    def _ensure_sqlite_directory(self) -> None:
        database = make_url(self.database_url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    def _setup_engine_events(self, engine: Engine) -> None:
        """Setup SQLAlchemy events for foreign keys and slow query logging"""

        if self.is_sqlite:
            @event.listens_for(engine, "connect")
            def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        @event.listens_for(engine, "before_cursor_execute")
        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            context._query_start_time = time.perf_counter()

        @event.listens_for(engine, "after_cursor_execute")
        def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            total_time_ms = (time.perf_counter() - context._query_start_time) * 1000
            if total_time_ms > PerformanceSettings.SLOW_QUERY_THRESHOLD_MS:
                self.logger.warning(
                    "🐢 Slow query detected (%.0fms): %s",
                    total_time_ms,
                    statement[:200],
                    extra={"operation_time": total_time_ms},
                )

    def get_session_factory(self) -> sessionmaker:
        """Get session factory"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.get_engine(), expire_on_commit=False)
        return self._session_factory

    def get_session(self) -> Session:
        """Get database session"""
        return self.get_session_factory()()

    def create_tables(self) -> None:
        """Create all database tables"""
        try:
            with PerformanceLogger("create_tables", self.logger):
                Base.metadata.create_all(self.get_engine())
            self.logger.info("✅ Database tables created successfully")
        except SQLAlchemyError as e:
            self.logger.error("💥 Failed to create database tables: %s", e, exc_info=True)
            raise DatabaseError(f"Failed to create database tables: {e}", "create_tables") from e

    def health_check(self) -> Dict[str, Any]:
        """Perform database health check"""
        try:
            with self.get_session() as session:
                result = session.execute(text("SELECT 1")).scalar()
            if result == 1:
                return {"status": "healthy", "environment": self.config.environment}
            return {"status": "unhealthy", "error": "Health check query returned unexpected result"}
        except SQLAlchemyError as e:
            self.logger.error("💥 Database health check failed: %s", e, exc_info=True)
            return {"status": "unhealthy", "error": type(e).__name__}

    def close(self) -> None:
        """Close database connections"""
        if self._engine:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.logger.info("Database connections closed")


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    """Get global database manager instance"""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def set_db_manager(manager: Optional[DatabaseManager]) -> None:
    """Replace the global database manager (used by tests and scripts)"""
    global _db_manager
    if _db_manager is not None and _db_manager is not manager:
        _db_manager.close()
    _db_manager = manager


def get_session() -> Session:
    """Get database session - convenience function"""
    return get_db_manager().get_session()


def init_db() -> None:
    """Create tables and the default company settings row"""
    manager = get_db_manager()
    manager.create_tables()

    with manager.get_session() as session:
        if session.query(CompanySettings).first() is None:
            session.add(CompanySettings(is_delivery=False))
            session.commit()
            logger.info("🆕 Default company settings created")
