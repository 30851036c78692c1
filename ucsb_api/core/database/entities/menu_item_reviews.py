"""
Menu item review entity models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base


class MenuItemReviewBase(Base):
    """Base fields for menu item reviews."""

    item_id: int = Field(description="Identifier of the reviewed dining commons menu item")
    reviewer_email: str = Field(description="Email of the reviewer")
    stars: int = Field(description="Star rating")
    date_reviewed: datetime = Field(sa_type=DateTime(timezone=False), description="When the review was written")
    comments: str = Field(description="Review text")


class MenuItemReview(MenuItemReviewBase, table=True):
    """Persistent menu item review.

    Table: menu_item_reviews
    """

    __tablename__ = "menu_item_reviews"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
