"""Services module."""

from eventhub.services.event_service import event_service
from eventhub.services.nudge_service import nudge_service

__all__ = [
    "event_service",
    "nudge_service",
]
