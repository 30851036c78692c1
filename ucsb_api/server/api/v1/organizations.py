"""
API endpoints for UCSB student organizations.

Organizations are keyed by their code (``orgCode``), which the client chooses
when creating the record. Posting an existing code replaces that record.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_api.core.database.entities import UCSBOrganization
from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.models.io import (
    ErrorResponse,
    GenericMessage,
    UCSBOrganizationRead,
    UCSBOrganizationWrite,
)
from ucsb_api.server.services.auth import require_admin, require_user
from ucsb_api.server.services.deps import OrganizationRepoDep

router = APIRouter(tags=["UCSBOrganization"])


@router.get(
    "/all",
    response_model=List[UCSBOrganizationRead],
    dependencies=[Depends(require_user)],
    summary="List all organizations",
)
async def all_organizations(repository: OrganizationRepoDep) -> List[UCSBOrganizationRead]:
    organizations = await repository.find_all()
    return [UCSBOrganizationRead.model_validate(o) for o in organizations]


@router.get(
    "",
    response_model=UCSBOrganizationRead,
    dependencies=[Depends(require_user)],
    summary="Get a single organization",
    responses={
        200: {"description": "Organization found"},
        404: {"model": ErrorResponse, "description": "Organization not found"},
    },
)
async def get_organization(
    repository: OrganizationRepoDep,
    org_code: str = Query(alias="orgCode", description="Code of the organization"),
) -> UCSBOrganizationRead:
    """
    Get an organization by its code.

    - **orgCode**: The organization code, e.g. 'ZPR'.
    """
    organization = await repository.find_by_id(org_code)
    if organization is None:
        raise EntityNotFoundException(UCSBOrganization, org_code)
    return UCSBOrganizationRead.model_validate(organization)


@router.post(
    "/post",
    response_model=UCSBOrganizationRead,
    dependencies=[Depends(require_admin)],
    summary="Create a new organization",
)
async def post_organization(
    repository: OrganizationRepoDep,
    org_code: str = Query(alias="orgCode"),
    org_translation_short: str = Query(alias="orgTranslationShort"),
    org_translation: str = Query(alias="orgTranslation"),
    inactive: bool = Query(),
) -> UCSBOrganizationRead:
    organization = UCSBOrganization(
        org_code=org_code,
        org_translation_short=org_translation_short,
        org_translation=org_translation,
        inactive=inactive,
    )
    saved = await repository.save(organization)
    return UCSBOrganizationRead.model_validate(saved)


@router.put(
    "",
    response_model=UCSBOrganizationRead,
    dependencies=[Depends(require_admin)],
    summary="Update a single organization",
    responses={404: {"model": ErrorResponse, "description": "Organization not found"}},
)
async def update_organization(
    incoming: UCSBOrganizationWrite,
    repository: OrganizationRepoDep,
    org_code: str = Query(alias="orgCode", description="Code of the organization to update"),
) -> UCSBOrganizationRead:
    """
    Update an organization.

    The code itself cannot be changed; only the translations and the inactive flag.
    """
    organization = await repository.find_by_id(org_code)
    if organization is None:
        raise EntityNotFoundException(UCSBOrganization, org_code)

    organization.org_translation_short = incoming.org_translation_short
    organization.org_translation = incoming.org_translation
    organization.inactive = incoming.inactive

    await repository.save(organization)
    return UCSBOrganizationRead.model_validate(organization)


@router.delete(
    "",
    response_model=GenericMessage,
    dependencies=[Depends(require_admin)],
    summary="Delete an organization",
    responses={404: {"model": ErrorResponse, "description": "Organization not found"}},
)
async def delete_organization(
    repository: OrganizationRepoDep,
    org_code: str = Query(alias="orgCode", description="Code of the organization to delete"),
) -> GenericMessage:
    organization = await repository.find_by_id(org_code)
    if organization is None:
        raise EntityNotFoundException(UCSBOrganization, org_code)

    await repository.delete(organization)
    return GenericMessage(message=f"UCSBOrganization with id {org_code} deleted")
