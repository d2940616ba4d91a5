"""Common Pydantic schemas and base classes."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Stored exactly as received; the API performs presence checks only.
JSONValue = Any


class BaseSchema(BaseModel):
    """
    Base for request bodies. Aliased fields are read only under their
    camelCase alias.
    """

    model_config = ConfigDict(extra="ignore")


class CreatedResponse(BaseModel):
    """Identifier of a newly inserted document."""

    id: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
