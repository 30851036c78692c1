"""
API endpoints for dining commons menu item reviews.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_api.core.database.entities import MenuItemReview
from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.logging_config import get_logger
from ucsb_api.core.models.io import (
    ErrorResponse,
    GenericMessage,
    MenuItemReviewRead,
    MenuItemReviewWrite,
)
from ucsb_api.server.core.constant import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_api.server.services.auth import require_admin, require_user
from ucsb_api.server.services.deps import MenuItemReviewRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["MenuItemReview"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Review not found"}}


@router.get(
    "/all",
    response_model=List[MenuItemReviewRead],
    dependencies=[Depends(require_user)],
    summary="List all menu item reviews",
)
async def all_menu_item_reviews(repository: MenuItemReviewRepoDep) -> List[MenuItemReviewRead]:
    reviews = await repository.find_all()
    return [MenuItemReviewRead.model_validate(r) for r in reviews]


@router.get(
    "",
    response_model=MenuItemReviewRead,
    dependencies=[Depends(require_user)],
    summary="Get a single menu item review",
    responses=_NOT_FOUND,
)
async def get_menu_item_review(
    repository: MenuItemReviewRepoDep,
    entity_id: int = Query(alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
) -> MenuItemReviewRead:
    review = await repository.find_by_id(entity_id)
    if review is None:
        raise EntityNotFoundException(MenuItemReview, entity_id)
    return MenuItemReviewRead.model_validate(review)


@router.post(
    "/post",
    response_model=MenuItemReviewRead,
    dependencies=[Depends(require_admin)],
    summary="Create a new menu item review",
)
async def post_menu_item_review(
    repository: MenuItemReviewRepoDep,
    item_id: int = Query(
        alias="itemID", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the reviewed menu item"
    ),
    reviewer_email: str = Query(alias="reviewerEmail"),
    stars: int = Query(),
    comments: str = Query(),
    date_reviewed: datetime = Query(
        alias="dateReviewed",
        description="date (in iso format, e.g. YYYY-mm-ddTHH:MM:SS)",
    ),
) -> MenuItemReviewRead:
    """
    Create a new menu item review.

    The review is stored as given; the star rating is not range checked.
    """
    logger.info(f"dateReviewed={date_reviewed.isoformat()}")

    review = MenuItemReview(
        item_id=item_id,
        reviewer_email=reviewer_email,
        stars=stars,
        date_reviewed=date_reviewed,
        comments=comments,
    )
    saved = await repository.save(review)
    return MenuItemReviewRead.model_validate(saved)


@router.put(
    "",
    response_model=MenuItemReviewRead,
    dependencies=[Depends(require_admin)],
    summary="Update a single menu item review",
    responses=_NOT_FOUND,
)
async def update_menu_item_review(
    incoming: MenuItemReviewWrite,
    repository: MenuItemReviewRepoDep,
    entity_id: int = Query(alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
) -> MenuItemReviewRead:
    review = await repository.find_by_id(entity_id)
    if review is None:
        raise EntityNotFoundException(MenuItemReview, entity_id)

    for key, value in incoming.model_dump().items():
        setattr(review, key, value)

    await repository.save(review)
    return MenuItemReviewRead.model_validate(review)


@router.delete(
    "",
    response_model=GenericMessage,
    dependencies=[Depends(require_admin)],
    summary="Delete a menu item review",
    responses=_NOT_FOUND,
)
async def delete_menu_item_review(
    repository: MenuItemReviewRepoDep,
    entity_id: int = Query(alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID),
) -> GenericMessage:
    review = await repository.find_by_id(entity_id)
    if review is None:
        raise EntityNotFoundException(MenuItemReview, entity_id)

    await repository.delete(review)
    return GenericMessage(message=f"MenuItemReview with id {entity_id} deleted")
