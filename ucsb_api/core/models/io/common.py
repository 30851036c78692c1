"""
Generic I/O models that are not tied to a single entity.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class GenericMessage(BaseModel):
    """A plain confirmation message, e.g. after a delete."""

    message: str


class ErrorResponse(BaseModel):
    """Structured body returned for application errors such as a missing record."""

    type: str = Field(description="Name of the exception that was raised")
    message: str = Field(description="Human-readable error message")


class CurrentUserRead(BaseModel):
    """The authenticated caller as seen by the API."""

    email: str
    roles: List[str] = Field(default_factory=list)
