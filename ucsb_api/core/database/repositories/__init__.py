"""
Repositories, one per entity.

Each repository exposes ``find_all``, ``find_by_id``, ``save`` and ``delete``
(see ``AsyncBaseRepository``).
"""

from .articles import ArticleRepository
from .base import AsyncBaseRepository, SqlModelRepository
from .dining_commons_menu_items import UCSBDiningCommonsMenuItemsRepository
from .help_requests import HelpRequestRepository
from .menu_item_reviews import MenuItemReviewRepository
from .organizations import UCSBOrganizationRepository

__all__ = [
    "ArticleRepository",
    "AsyncBaseRepository",
    "HelpRequestRepository",
    "MenuItemReviewRepository",
    "SqlModelRepository",
    "UCSBDiningCommonsMenuItemsRepository",
    "UCSBOrganizationRepository",
]
