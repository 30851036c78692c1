"""
Help request entity models.

A help request is raised by a student team during lab sections and records
who asked, where they are sitting and whether staff have solved it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base


class HelpRequestBase(Base):
    """Base fields for help requests."""

    requester_email: str = Field(description="Email of the student asking for help")
    team_id: str = Field(description="Team identifier (e.g., 's22-5pm-3')")
    table_or_breakout_room: str = Field(description="Table number or breakout room name")
    request_time: datetime = Field(sa_type=DateTime(timezone=False), description="When the request was made")
    explanation: str = Field(description="Free-text description of the problem")
    solved: bool = Field(default=False, description="Whether the request has been solved")


class HelpRequest(HelpRequestBase, table=True):
    """Persistent help request.

    Table: help_requests
    """

    __tablename__ = "help_requests"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
