"""Database configuration and lifecycle."""

from .config import (
    DatabaseSettings,
    RepositorySettings,
    get_database_settings,
    get_repository_settings,
)
from .lifecycle import (
    close_database,
    create_engine,
    create_session_factory,
    create_tables,
    enable_sqlite_foreign_keys,
    get_session_factory,
    init_database,
)

__all__ = [
    "DatabaseSettings",
    "RepositorySettings",
    "close_database",
    "create_engine",
    "create_session_factory",
    "create_tables",
    "enable_sqlite_foreign_keys",
    "get_database_settings",
    "get_repository_settings",
    "get_session_factory",
    "init_database",
]
