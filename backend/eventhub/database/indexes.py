"""
MongoDB Index Definitions

Creates the indexes the API queries rely on.

Indexes by Collection:
- events: schedule (descending), used by the "latest" pagination ordering

Called from the application lifespan once the store answers a ping.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from eventhub.config import settings

logger = logging.getLogger(__name__)


async def ensure_indexes(db: AsyncIOMotorDatabase) -> list[str]:
    """Create missing indexes and return their names."""
    created = [
        await db[settings.events_collection].create_index(
            [("schedule", DESCENDING)],
            name="schedule_desc",
        ),
    ]
    logger.info(f"Ensured indexes: {', '.join(created)}")
    return created
