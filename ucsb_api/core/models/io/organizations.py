"""
Student organization I/O models for API requests and responses.

The organization code is the identifier, so updates carry it in the query
string and the body holds only the descriptive fields.
"""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class UCSBOrganizationWrite(CamelModel):
    """Schema for the JSON body of an organization update."""

    org_translation_short: str = Field(description="Short display name")
    org_translation: str = Field(description="Full display name")
    inactive: bool = Field(description="Whether the organization is inactive")


class UCSBOrganizationRead(UCSBOrganizationWrite):
    """Schema for reading an organization from the API."""

    org_code: str = Field(description="Organization code")
