"""
API I/O schemas.

Read models are built from ORM entities with ``model_validate`` and serialize
with camelCase field names; write models parse camelCase JSON bodies.
"""

from .articles import ArticleRead, ArticleWrite
from .common import CurrentUserRead, ErrorResponse, GenericMessage
from .dining_commons_menu_items import (
    UCSBDiningCommonsMenuItemsRead,
    UCSBDiningCommonsMenuItemsWrite,
)
from .help_requests import HelpRequestRead, HelpRequestWrite
from .menu_item_reviews import MenuItemReviewRead, MenuItemReviewWrite
from .organizations import UCSBOrganizationRead, UCSBOrganizationWrite

__all__ = [
    "ArticleRead",
    "ArticleWrite",
    "CurrentUserRead",
    "ErrorResponse",
    "GenericMessage",
    "HelpRequestRead",
    "HelpRequestWrite",
    "MenuItemReviewRead",
    "MenuItemReviewWrite",
    "UCSBDiningCommonsMenuItemsRead",
    "UCSBDiningCommonsMenuItemsWrite",
    "UCSBOrganizationRead",
    "UCSBOrganizationWrite",
]
