"""
Menu item review I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class MenuItemReviewWrite(CamelModel):
    """Schema for the JSON body of a menu item review update."""

    item_id: int = Field(alias="itemID", description="Identifier of the reviewed menu item")
    reviewer_email: str = Field(description="Email of the reviewer")
    stars: int = Field(description="Star rating")
    date_reviewed: datetime = Field(description="When the review was written (ISO-8601)")
    comments: str = Field(description="Review text")


class MenuItemReviewRead(MenuItemReviewWrite):
    """Schema for reading a menu item review from the API."""

    id: Optional[int] = None
