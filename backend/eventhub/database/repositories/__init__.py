"""
Repository Pattern for MongoDB

Database abstraction layer providing:
- Testability with mock repositories
- Centralized query logic
- Store error translation in one place

Repositories:
- BaseRepository: Common CRUD operations
- EventRepository: Event queries with skip/limit pagination
- NudgeRepository: Standalone nudge documents
"""

from eventhub.database.repositories.base import (
    BaseRepository,
    serialize_document,
    store_errors,
    to_object_id,
)
from eventhub.database.repositories.events import EventRepository
from eventhub.database.repositories.nudges import NudgeRepository

__all__ = [
    "BaseRepository",
    "EventRepository",
    "NudgeRepository",
    "serialize_document",
    "store_errors",
    "to_object_id",
]
