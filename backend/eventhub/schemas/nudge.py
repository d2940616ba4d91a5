"""Standalone nudge Pydantic schemas."""

from pydantic import Field

from eventhub.schemas.common import BaseSchema, JSONValue


class NudgeCreate(BaseSchema):
    """Flat request body; schedule fields are nested when stored."""

    tag: JSONValue = None
    title: JSONValue = None
    cover_image: JSONValue = Field(default=None, alias="coverImage")
    date: JSONValue = None
    start_time: JSONValue = Field(default=None, alias="startTime")
    end_time: JSONValue = Field(default=None, alias="endTime")
    description: JSONValue = None
    icon: JSONValue = None
    invitation_text: JSONValue = Field(default=None, alias="invitationText")
