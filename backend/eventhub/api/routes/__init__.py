"""API routes module."""

from eventhub.api.routes.events import router as events_router

__all__ = [
    "events_router",
]
