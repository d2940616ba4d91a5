"""Events API routes."""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from eventhub.database import get_db
from eventhub.schemas import (
    CreatedResponse,
    ErrorResponse,
    EventCreate,
    EventUpdate,
    MessageResponse,
    NudgeCreate,
)
from eventhub.services import event_service, nudge_service

router = APIRouter(tags=["Events"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_SERVER_ERROR = {500: {"model": ErrorResponse}}


@router.get("/events", responses={**_NOT_FOUND, **_SERVER_ERROR})
async def get_events(
    id: Optional[str] = Query(default=None, description="Fetch a single event by id"),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> Any:
    """Get one event by id, or every event when no id is given."""
    if id:
        return await event_service.get_event(db, id)
    return await event_service.list_events(db)


@router.get("/events_pagination", responses=_SERVER_ERROR)
async def get_events_page(
    type: Optional[str] = Query(default=None, description='"latest" orders by schedule descending'),
    limit: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> list[dict[str, Any]]:
    """List events one page at a time."""
    return await event_service.paginate_events(db, ordering=type, limit=limit, page=page)


@router.post(
    "/events",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=_SERVER_ERROR,
)
async def create_event(
    payload: Optional[EventCreate] = None,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Create an event with optional nudge tagging."""
    event_id = await event_service.create_event(db, payload or EventCreate())
    return CreatedResponse(id=event_id)


@router.put(
    "/events/{event_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def update_event(
    event_id: str,
    payload: Optional[EventUpdate] = None,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Update the provided fields of an existing event."""
    await event_service.update_event(db, event_id, payload or EventUpdate())
    return MessageResponse(message="Event updated")


@router.delete(
    "/events/{event_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_event(
    event_id: str,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    await event_service.delete_event(db, event_id)
    return MessageResponse(message="Event deleted")


@router.post(
    "/events/nudge",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    responses=_SERVER_ERROR,
)
async def create_nudge(
    payload: Optional[NudgeCreate] = None,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Create a standalone promotional nudge."""
    nudge_id = await nudge_service.create_nudge(db, payload or NudgeCreate())
    return CreatedResponse(id=nudge_id)
