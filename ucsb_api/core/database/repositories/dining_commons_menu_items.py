"""
Dining commons menu item repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.dining_commons_menu_items import UCSBDiningCommonsMenuItems
from .base import SqlModelRepository


class UCSBDiningCommonsMenuItemsRepository(SqlModelRepository[UCSBDiningCommonsMenuItems]):
    """Repository for dining commons menu item data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UCSBDiningCommonsMenuItems)
