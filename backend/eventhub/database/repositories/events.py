"""
EventRepository

MongoDB operations for the 'events' collection.

Specialized Methods:
- paginate(limit, skip, latest_first): One skip/limit window, optionally
  ordered by schedule descending
"""

from typing import Any, Dict, List

from pymongo import DESCENDING

from eventhub.config import settings
from eventhub.database.repositories.base import BaseRepository


class EventRepository(BaseRepository):
    collection_name = settings.events_collection

    async def paginate(
        self,
        limit: int,
        skip: int,
        latest_first: bool = False,
    ) -> List[Dict[str, Any]]:
        """Return one page; natural store order unless latest_first."""
        sort = [("schedule", DESCENDING)] if latest_first else None
        return await self.find_many(limit=limit, skip=skip, sort=sort)
