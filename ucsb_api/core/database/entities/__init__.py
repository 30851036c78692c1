"""
Database entities, one module per table.

Importing this package registers every table on ``Base.metadata``.
"""

from .articles import Article, ArticleBase
from .dining_commons_menu_items import (
    UCSBDiningCommonsMenuItems,
    UCSBDiningCommonsMenuItemsBase,
)
from .help_requests import HelpRequest, HelpRequestBase
from .menu_item_reviews import MenuItemReview, MenuItemReviewBase
from .organizations import UCSBOrganization, UCSBOrganizationBase

__all__ = [
    "Article",
    "ArticleBase",
    "HelpRequest",
    "HelpRequestBase",
    "MenuItemReview",
    "MenuItemReviewBase",
    "UCSBDiningCommonsMenuItems",
    "UCSBDiningCommonsMenuItemsBase",
    "UCSBOrganization",
    "UCSBOrganizationBase",
]
