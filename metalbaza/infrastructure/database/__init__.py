"""
Database Infrastructure

Contains SQLAlchemy models and engine/session management.
"""

from .models import Base
from .operations import DatabaseManager, get_db_manager, get_session, init_db, set_db_manager

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "get_session",
    "init_db",
    "set_db_manager",
]
