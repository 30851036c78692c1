"""
API Dependencies.

Annotated dependency aliases for the authenticated caller and for the
per-entity repositories, each bound to the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ucsb_api.core.database.repositories import (
    ArticleRepository,
    HelpRequestRepository,
    MenuItemReviewRepository,
    UCSBDiningCommonsMenuItemsRepository,
    UCSBOrganizationRepository,
)
from ucsb_api.server.core.database import get_session
from ucsb_api.server.services.auth import CurrentUser, require_user

SessionDep = Annotated[AsyncSession, Depends(get_session)]

UserDep = Annotated[CurrentUser, Depends(require_user)]


def get_help_request_repository(session: SessionDep) -> HelpRequestRepository:
    return HelpRequestRepository(session)


def get_menu_item_review_repository(session: SessionDep) -> MenuItemReviewRepository:
    return MenuItemReviewRepository(session)


def get_menu_items_repository(session: SessionDep) -> UCSBDiningCommonsMenuItemsRepository:
    return UCSBDiningCommonsMenuItemsRepository(session)


def get_article_repository(session: SessionDep) -> ArticleRepository:
    return ArticleRepository(session)


def get_organization_repository(session: SessionDep) -> UCSBOrganizationRepository:
    return UCSBOrganizationRepository(session)


HelpRequestRepoDep = Annotated[HelpRequestRepository, Depends(get_help_request_repository)]
MenuItemReviewRepoDep = Annotated[MenuItemReviewRepository, Depends(get_menu_item_review_repository)]
MenuItemsRepoDep = Annotated[UCSBDiningCommonsMenuItemsRepository, Depends(get_menu_items_repository)]
ArticleRepoDep = Annotated[ArticleRepository, Depends(get_article_repository)]
OrganizationRepoDep = Annotated[UCSBOrganizationRepository, Depends(get_organization_repository)]
