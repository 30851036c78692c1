"""
Menu item review repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.menu_item_reviews import MenuItemReview
from .base import SqlModelRepository


class MenuItemReviewRepository(SqlModelRepository[MenuItemReview]):
    """Repository for menu item review data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, MenuItemReview)
