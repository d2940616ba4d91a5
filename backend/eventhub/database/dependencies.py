"""
FastAPI dependency injection for the database handle.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from eventhub.database.connection import get_database


async def get_db() -> AsyncIOMotorDatabase:
    """
    FastAPI dependency that provides the shared database handle.

    Usage:
        @router.get("/events")
        async def list_events(db: AsyncIOMotorDatabase = Depends(get_db)):
            return await EventRepository(db).find_many()

    The handle is backed by the process-wide client pool; nothing is opened
    or closed per request.
    """
    return get_database()
