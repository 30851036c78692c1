"""
Help request repository.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.help_requests import HelpRequest
from .base import SqlModelRepository


class HelpRequestRepository(SqlModelRepository[HelpRequest]):
    """Repository for help request data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, HelpRequest)
