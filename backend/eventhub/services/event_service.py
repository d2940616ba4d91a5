"""Event management service."""

import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from eventhub.config import settings
from eventhub.database.repositories import EventRepository
from eventhub.schemas import EventCreate, EventOrdering, EventUpdate
from eventhub.utils.errors import EventNotFoundError
from eventhub.utils.params import parse_int_param

logger = logging.getLogger(__name__)

# Top-level fields a PUT may change. type, uid and attendees are never written.
MUTABLE_FIELDS = (
    "name",
    "files",
    "tagline",
    "schedule",
    "description",
    "moderator",
    "category",
    "sub_category",
    "rigor_rank",
)


def _is_truthy(value: Any) -> bool:
    """
    Truthiness as the request body sees it: only null, false, 0, NaN and ""
    are falsy. Empty lists and objects count as values.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


def build_event_document(payload: EventCreate) -> dict[str, Any]:
    """Shape a create body into a stored event."""
    return {
        "type": "event",
        "uid": payload.uid,
        "name": payload.name,
        "tagline": payload.tagline,
        "schedule": payload.schedule,
        "description": payload.description,
        "files": payload.files,
        "moderator": payload.moderator,
        "category": payload.category,
        "sub_category": payload.sub_category,
        "rigor_rank": payload.rigor_rank,
        "attendees": [],
        "nudge": {
            "tagged": payload.tagged if _is_truthy(payload.tagged) else False,
            "title": payload.nudge_title if _is_truthy(payload.nudge_title) else "",
        },
    }


def merge_event_update(existing: dict[str, Any], payload: EventUpdate) -> dict[str, Any]:
    """
    Resolve each whitelisted field independently: the request value when the
    key was sent, otherwise the stored value.
    """
    provided = payload.model_fields_set
    merged = {
        field: getattr(payload, field) if field in provided else existing.get(field)
        for field in MUTABLE_FIELDS
    }

    stored_nudge = existing.get("nudge") or {}
    merged["nudge"] = {
        "tagged": payload.tagged if "tagged" in provided else stored_nudge.get("tagged"),
        "title": payload.nudge_title if "nudge_title" in provided else stored_nudge.get("title"),
    }
    return merged


class EventService:
    """
    CRUD over the events collection.
    Each method performs one logical store operation through EventRepository.
    """

    async def get_event(self, db: AsyncIOMotorDatabase, event_id: str) -> dict[str, Any]:
        event = await EventRepository(db).find_by_id(event_id)
        if event is None:
            raise EventNotFoundError()
        return event

    async def list_events(self, db: AsyncIOMotorDatabase) -> list[dict[str, Any]]:
        """Every event, unfiltered and unbounded."""
        return await EventRepository(db).find_many()

    async def paginate_events(
        self,
        db: AsyncIOMotorDatabase,
        ordering: Optional[str] = None,
        limit: Optional[str] = None,
        page: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        Return one skip/limit window of events.

        Args:
            ordering: "latest" sorts by schedule descending; anything else
                keeps the store's natural order
            limit: raw query value, parsed leniently
            page: raw query value, 1-based, parsed leniently
        """
        limit_value = parse_int_param(limit, settings.pagination_default_limit)
        page_value = parse_int_param(page, settings.pagination_default_page)
        skip = (page_value - 1) * limit_value

        return await EventRepository(db).paginate(
            limit=limit_value,
            skip=skip,
            latest_first=ordering == EventOrdering.LATEST.value,
        )

    async def create_event(self, db: AsyncIOMotorDatabase, payload: EventCreate) -> str:
        event_id = await EventRepository(db).create(build_event_document(payload))
        logger.info(f"Created event {event_id}")
        return event_id

    async def update_event(
        self,
        db: AsyncIOMotorDatabase,
        event_id: str,
        payload: EventUpdate,
    ) -> None:
        """
        Merge the provided fields into an existing event.

        Raises EventNotFoundError when the event is missing or when the write
        changed nothing, which includes submitting the values already stored.
        """
        repository = EventRepository(db)
        # Merge against the stored document so ObjectIds are written back as-is
        existing = await repository.get_document(event_id)
        if existing is None:
            raise EventNotFoundError()

        updated = await repository.update(event_id, merge_event_update(existing, payload))
        if not updated:
            raise EventNotFoundError()
        logger.info(f"Updated event {event_id}")

    async def delete_event(self, db: AsyncIOMotorDatabase, event_id: str) -> None:
        deleted = await EventRepository(db).delete(event_id)
        if not deleted:
            raise EventNotFoundError()
        logger.info(f"Deleted event {event_id}")


# Singleton instance
event_service = EventService()
