"""
Dining commons menu item I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .base import CamelModel


class UCSBDiningCommonsMenuItemsWrite(CamelModel):
    """Schema for the JSON body of a menu item update."""

    dining_commons_code: str = Field(description="Dining commons code")
    name: str = Field(description="Name of the dish")
    station: str = Field(description="Station where the dish is served")


class UCSBDiningCommonsMenuItemsRead(UCSBDiningCommonsMenuItemsWrite):
    """Schema for reading a menu item from the API."""

    id: Optional[int] = None
