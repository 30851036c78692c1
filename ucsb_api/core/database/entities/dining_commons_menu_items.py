"""
Dining commons menu item entity models.

The entity keeps its historical plural name because it appears verbatim in
the API path and in not-found messages.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class UCSBDiningCommonsMenuItemsBase(Base):
    """Base fields for dining commons menu items."""

    dining_commons_code: str = Field(description="Dining commons code (e.g., 'ortega')")
    name: str = Field(description="Name of the dish")
    station: str = Field(description="Station where the dish is served")


class UCSBDiningCommonsMenuItems(UCSBDiningCommonsMenuItemsBase, table=True):
    """Persistent dining commons menu item.

    Table: ucsb_dining_commons_menu_items
    """

    __tablename__ = "ucsb_dining_commons_menu_items"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
