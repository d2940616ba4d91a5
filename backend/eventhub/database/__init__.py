"""
Database module initialization.
Exports database components for use throughout the application.
"""

from eventhub.database.connection import (
    init_db,
    close_db,
    get_client,
    get_database,
    check_db_connection,
    get_db_info,
)
from eventhub.database.dependencies import get_db
from eventhub.database.indexes import ensure_indexes

__all__ = [
    # Connection management
    "init_db",
    "close_db",
    "get_client",
    "get_database",
    # Dependencies
    "get_db",
    # Utilities
    "check_db_connection",
    "get_db_info",
    "ensure_indexes",
]
