"""
Student organization entity models.

Unlike the other entities, organizations are keyed by a client supplied
code rather than a generated integer.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class UCSBOrganizationBase(Base):
    """Base fields for student organizations."""

    org_translation_short: str = Field(description="Short display name")
    org_translation: str = Field(description="Full display name")
    inactive: bool = Field(default=False, description="Whether the organization is inactive")


class UCSBOrganization(UCSBOrganizationBase, table=True):
    """Persistent student organization.

    Table: ucsb_organizations
    """

    __tablename__ = "ucsb_organizations"
    __table_args__ = ({"extend_existing": True},)

    org_code: str = Field(primary_key=True, description="Organization code (e.g., 'ZPR')")
