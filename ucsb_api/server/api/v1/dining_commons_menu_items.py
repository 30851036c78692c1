"""
API endpoints for dining commons menu items.

Each item names a dish, the dining commons serving it and the station it is
served from.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_api.core.database.entities import UCSBDiningCommonsMenuItems
from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.models.io import (
    ErrorResponse,
    GenericMessage,
    UCSBDiningCommonsMenuItemsRead,
    UCSBDiningCommonsMenuItemsWrite,
)
from ucsb_api.server.core.constant import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_api.server.services.auth import require_admin, require_user
from ucsb_api.server.services.deps import MenuItemsRepoDep

router = APIRouter(tags=["UCSBDiningCommonsMenuItems"])


@router.get(
    "/all",
    response_model=List[UCSBDiningCommonsMenuItemsRead],
    dependencies=[Depends(require_user)],
    summary="List all items",
    response_description="A list of menu item objects.",
)
async def all_items(repository: MenuItemsRepoDep) -> List[UCSBDiningCommonsMenuItemsRead]:
    """
    List all menu items.
    """
    items = await repository.find_all()
    return [UCSBDiningCommonsMenuItemsRead.model_validate(item) for item in items]


@router.get(
    "",
    response_model=UCSBDiningCommonsMenuItemsRead,
    dependencies=[Depends(require_user)],
    summary="Get a single item",
    responses={
        200: {"description": "Menu item found"},
        404: {"model": ErrorResponse, "description": "Menu item not found"},
    },
)
async def get_item(
    repository: MenuItemsRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the menu item"
    ),
) -> UCSBDiningCommonsMenuItemsRead:
    """
    Get a single menu item by id.

    - **id**: The unique identifier of the menu item.
    """
    item = await repository.find_by_id(entity_id)
    if item is None:
        raise EntityNotFoundException(UCSBDiningCommonsMenuItems, entity_id)
    return UCSBDiningCommonsMenuItemsRead.model_validate(item)


@router.post(
    "/post",
    response_model=UCSBDiningCommonsMenuItemsRead,
    dependencies=[Depends(require_admin)],
    summary="Create a new item",
    response_description="The saved menu item.",
)
async def post_item(
    repository: MenuItemsRepoDep,
    dining_commons_code: str = Query(alias="diningCommonsCode", description="The dining hall code"),
    name: str = Query(description="The name of the menu item"),
    station: str = Query(description="Where the food is located"),
) -> UCSBDiningCommonsMenuItemsRead:
    """
    Create a new menu item.

    - **diningCommonsCode**: The dining hall code (e.g., 'ortega').
    - **name**: The name of the menu item.
    - **station**: The station the item is served from.
    """
    item = UCSBDiningCommonsMenuItems(
        dining_commons_code=dining_commons_code,
        name=name,
        station=station,
    )
    saved = await repository.save(item)
    return UCSBDiningCommonsMenuItemsRead.model_validate(saved)


@router.put(
    "",
    response_model=UCSBDiningCommonsMenuItemsRead,
    dependencies=[Depends(require_admin)],
    summary="Update a single item",
    responses={
        200: {"description": "Menu item updated"},
        404: {"model": ErrorResponse, "description": "Menu item not found"},
    },
)
async def update_item(
    incoming: UCSBDiningCommonsMenuItemsWrite,
    repository: MenuItemsRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the menu item to update"
    ),
) -> UCSBDiningCommonsMenuItemsRead:
    """
    Update a menu item.

    Replaces the code, name and station of an existing item.
    """
    item = await repository.find_by_id(entity_id)
    if item is None:
        raise EntityNotFoundException(UCSBDiningCommonsMenuItems, entity_id)

    item.dining_commons_code = incoming.dining_commons_code
    item.name = incoming.name
    item.station = incoming.station

    await repository.save(item)
    return UCSBDiningCommonsMenuItemsRead.model_validate(item)


@router.delete(
    "",
    response_model=GenericMessage,
    dependencies=[Depends(require_admin)],
    summary="Delete an item",
    responses={
        200: {"description": "Menu item deleted"},
        404: {"model": ErrorResponse, "description": "Menu item not found"},
    },
)
async def delete_item(
    repository: MenuItemsRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the menu item to delete"
    ),
) -> GenericMessage:
    """
    Delete a menu item.
    """
    item = await repository.find_by_id(entity_id)
    if item is None:
        raise EntityNotFoundException(UCSBDiningCommonsMenuItems, entity_id)

    await repository.delete(item)
    return GenericMessage(message=f"UCSBDiningCommonsMenuItems with id {entity_id} deleted")
