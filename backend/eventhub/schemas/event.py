"""Event Pydantic schemas."""

from enum import Enum

from pydantic import Field

from eventhub.schemas.common import BaseSchema, JSONValue


class EventOrdering(str, Enum):
    """Values of the pagination `type` parameter that change ordering."""

    LATEST = "latest"


class EventCreate(BaseSchema):
    """Event creation body. Every field is optional and unvalidated."""

    uid: JSONValue = None
    name: JSONValue = None
    tagline: JSONValue = None
    schedule: JSONValue = None
    description: JSONValue = None
    files: JSONValue = None
    moderator: JSONValue = None
    category: JSONValue = None
    sub_category: JSONValue = None
    rigor_rank: JSONValue = None
    tagged: JSONValue = None
    nudge_title: JSONValue = Field(default=None, alias="nudgeTitle")


class EventUpdate(BaseSchema):
    """
    Event update body.

    Only keys actually present in the request are applied, so explicit
    false, 0, "" and null all overwrite the stored value.
    """

    name: JSONValue = None
    files: JSONValue = None
    tagline: JSONValue = None
    schedule: JSONValue = None
    description: JSONValue = None
    moderator: JSONValue = None
    category: JSONValue = None
    sub_category: JSONValue = None
    rigor_rank: JSONValue = None
    tagged: JSONValue = None
    nudge_title: JSONValue = Field(default=None, alias="nudgeTitle")
