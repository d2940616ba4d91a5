"""Request and response schemas."""

from eventhub.schemas.common import (
    BaseSchema,
    CreatedResponse,
    ErrorResponse,
    JSONValue,
    MessageResponse,
)
from eventhub.schemas.event import EventCreate, EventOrdering, EventUpdate
from eventhub.schemas.nudge import NudgeCreate

__all__ = [
    "BaseSchema",
    "CreatedResponse",
    "ErrorResponse",
    "EventCreate",
    "EventOrdering",
    "EventUpdate",
    "JSONValue",
    "MessageResponse",
    "NudgeCreate",
]
