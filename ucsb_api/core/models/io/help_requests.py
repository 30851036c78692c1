"""
Help request I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class HelpRequestWrite(CamelModel):
    """Schema for the JSON body of a help request update."""

    requester_email: str = Field(description="Email of the student asking for help")
    team_id: str = Field(description="Team identifier")
    table_or_breakout_room: str = Field(description="Table number or breakout room name")
    request_time: datetime = Field(description="When the request was made (ISO-8601)")
    explanation: str = Field(description="Free-text description of the problem")
    solved: bool = Field(description="Whether the request has been solved")


class HelpRequestRead(HelpRequestWrite):
    """Schema for reading a help request from the API."""

    id: Optional[int] = None
