"""
Endpoint describing the logged-in caller.

The front end uses it to decide which pages and buttons to show.
"""

from fastapi import APIRouter

from ucsb_api.core.models.io import CurrentUserRead
from ucsb_api.server.services.deps import UserDep

router = APIRouter(tags=["Current user"])


@router.get(
    "",
    response_model=CurrentUserRead,
    summary="Get information about the current user",
)
async def current_user_info(current_user: UserDep) -> CurrentUserRead:
    return CurrentUserRead(email=current_user.email, roles=current_user.roles)
