"""
Database connection, session management, seeding and migration utilities.

This module provides async SQLAlchemy engine configuration, session and
transaction management, the sample data set and the Alembic wrapper for the
clinic application.
"""

from .connection import (
    DatabaseConfig,
    check_connection,
    close_engine,
    create_engine,
    get_database_url,
    wait_for_database,
)
from .migrations import MigrationManager
from .seed import seed_sample_data
from .session import SessionManager

__all__ = [
    # Connection utilities
    "DatabaseConfig",
    "create_engine",
    "get_database_url",
    "check_connection",
    "close_engine",
    "wait_for_database",
    # Session management
    "SessionManager",
    # Data and schema
    "seed_sample_data",
    "MigrationManager",
]
