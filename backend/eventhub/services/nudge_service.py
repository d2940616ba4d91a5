"""Standalone nudge service."""

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from eventhub.database.repositories import NudgeRepository
from eventhub.schemas import NudgeCreate

logger = logging.getLogger(__name__)


def build_nudge_document(payload: NudgeCreate) -> dict[str, Any]:
    """Nest the flat date/startTime/endTime fields under schedule."""
    return {
        "tag": payload.tag,
        "title": payload.title,
        "coverImage": payload.cover_image,
        "schedule": {
            "date": payload.date,
            "time": {
                "start": payload.start_time,
                "end": payload.end_time,
            },
        },
        "description": payload.description,
        "icon": payload.icon,
        "invitationText": payload.invitation_text,
    }


class NudgeService:
    """Creates promotional nudge documents."""

    async def create_nudge(self, db: AsyncIOMotorDatabase, payload: NudgeCreate) -> str:
        nudge_id = await NudgeRepository(db).create(build_nudge_document(payload))
        logger.info(f"Created nudge {nudge_id}")
        return nudge_id


# Singleton instance
nudge_service = NudgeService()
