"""
Student organization repository.

Organizations are keyed by ``org_code``, which the client supplies. Saving an
organization whose code already exists replaces the stored row.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.organizations import UCSBOrganization
from .base import SqlModelRepository


class UCSBOrganizationRepository(SqlModelRepository[UCSBOrganization]):
    """Repository for student organization data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, UCSBOrganization)
