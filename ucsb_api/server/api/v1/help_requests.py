"""
API endpoints for help requests.

Students raise help requests during lab sections; staff list them, look them
up, and mark them solved. Reads require ``ROLE_USER``; writes require
``ROLE_ADMIN``.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_api.core.database.entities import HelpRequest
from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.logging_config import get_logger
from ucsb_api.core.models.io import (
    ErrorResponse,
    GenericMessage,
    HelpRequestRead,
    HelpRequestWrite,
)
from ucsb_api.server.core.constant import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_api.server.services.auth import require_admin, require_user
from ucsb_api.server.services.deps import HelpRequestRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["HelpRequest"])


@router.get(
    "/all",
    response_model=List[HelpRequestRead],
    dependencies=[Depends(require_user)],
    summary="List all help requests",
    description="Retrieve every stored help request. No pagination or filtering is applied.",
    response_description="A list of help request objects.",
)
async def all_help_requests(repository: HelpRequestRepoDep) -> List[HelpRequestRead]:
    """
    List all help requests.

    Returns the full contents of the help request table in the order the
    database reports them.
    """
    help_requests = await repository.find_all()
    return [HelpRequestRead.model_validate(h) for h in help_requests]


@router.get(
    "",
    response_model=HelpRequestRead,
    dependencies=[Depends(require_user)],
    summary="Get a single help request",
    description="Retrieve a specific help request by its unique identifier.",
    responses={
        200: {"description": "Help request found"},
        404: {"model": ErrorResponse, "description": "Help request not found"},
    },
)
async def get_help_request(
    repository: HelpRequestRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the help request"
    ),
) -> HelpRequestRead:
    """
    Get a help request by ID.

    - **id**: The unique identifier of the help request.
    """
    help_request = await repository.find_by_id(entity_id)
    if help_request is None:
        raise EntityNotFoundException(HelpRequest, entity_id)
    return HelpRequestRead.model_validate(help_request)


@router.post(
    "/post",
    response_model=HelpRequestRead,
    dependencies=[Depends(require_admin)],
    summary="Create a new help request",
    description="Create a help request from query parameters. The id is generated by the database.",
    response_description="The saved help request, including its generated id.",
)
async def post_help_request(
    repository: HelpRequestRepoDep,
    requester_email: str = Query(alias="requesterEmail"),
    team_id: str = Query(alias="teamId"),
    table_or_breakout_room: str = Query(alias="tableOrBreakoutRoom"),
    explanation: str = Query(),
    solved: bool = Query(),
    request_time: datetime = Query(
        alias="requestTime",
        description="date (in iso format, e.g. YYYY-mm-ddTHH:MM:SS; see https://en.wikipedia.org/wiki/ISO_8601)",
    ),
) -> HelpRequestRead:
    """
    Create a new help request.

    - **requesterEmail**: Email of the student asking for help.
    - **teamId**: Team identifier.
    - **tableOrBreakoutRoom**: Where the team is sitting.
    - **explanation**: What the problem is.
    - **solved**: Whether it is already solved.
    - **requestTime**: ISO-8601 local date-time of the request.
    """
    logger.info(f"requestTime={request_time.isoformat()}")

    help_request = HelpRequest(
        requester_email=requester_email,
        team_id=team_id,
        table_or_breakout_room=table_or_breakout_room,
        request_time=request_time,
        explanation=explanation,
        solved=solved,
    )
    saved = await repository.save(help_request)
    return HelpRequestRead.model_validate(saved)


@router.put(
    "",
    response_model=HelpRequestRead,
    dependencies=[Depends(require_admin)],
    summary="Update a single help request",
    description="Replace the fields of an existing help request with the JSON body.",
    responses={
        200: {"description": "Help request updated"},
        404: {"model": ErrorResponse, "description": "Help request not found"},
    },
)
async def update_help_request(
    incoming: HelpRequestWrite,
    repository: HelpRequestRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the help request to update"
    ),
) -> HelpRequestRead:
    """
    Update a help request.

    The id is taken from the query string; an id in the body is ignored.
    """
    help_request = await repository.find_by_id(entity_id)
    if help_request is None:
        raise EntityNotFoundException(HelpRequest, entity_id)

    for key, value in incoming.model_dump().items():
        setattr(help_request, key, value)

    await repository.save(help_request)
    return HelpRequestRead.model_validate(help_request)


@router.delete(
    "",
    response_model=GenericMessage,
    dependencies=[Depends(require_admin)],
    summary="Delete a help request",
    responses={
        200: {"description": "Help request deleted"},
        404: {"model": ErrorResponse, "description": "Help request not found"},
    },
)
async def delete_help_request(
    repository: HelpRequestRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the help request to delete"
    ),
) -> GenericMessage:
    help_request = await repository.find_by_id(entity_id)
    if help_request is None:
        raise EntityNotFoundException(HelpRequest, entity_id)

    await repository.delete(help_request)
    return GenericMessage(message=f"HelpRequest with id {entity_id} deleted")
