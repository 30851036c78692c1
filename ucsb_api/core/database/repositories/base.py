"""
Base repository interfaces and utilities.

This module provides the repository abstraction shared by every entity:
a small capability set of ``find_all``, ``find_by_id``, ``save`` and
``delete``, plus one generic implementation over an async SQLAlchemy session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from ucsb_api.core.logging_config import get_logger

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with the CRUD capability set."""

    @abstractmethod
    async def find_all(self) -> List[EntityType]:
        """Return every stored entity.

        No pagination, filtering or sorting is applied; rows come back in the
        order the store reports them.

        Returns:
            List of entity instances
        """

    @abstractmethod
    async def find_by_id(self, entity_id: Any) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def save(self, entity: EntityType) -> EntityType:
        """Insert or update an entity.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def delete(self, entity: EntityType) -> None:
        """Remove a previously loaded entity.

        Args:
            entity: SQLModel instance to delete
        """


class SqlModelRepository(AsyncBaseRepository[EntityType]):
    """Repository implementation backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def find_all(self) -> List[EntityType]:
        stmt = select(self.model)
        result = await self.session.execute(stmt)
        entities = list(result.scalars().all())
        logger.debug(f"Retrieved {len(entities)} {self.model.__name__} records")
        return entities

    async def find_by_id(self, entity_id: Any) -> Optional[EntityType]:
        return await self.session.get(self.model, entity_id)

    async def save(self, entity: EntityType) -> EntityType:
        """Merge the entity by primary key, commit and refresh it.

        An entity without a primary key is inserted and receives its generated
        identifier; one whose key already exists replaces the stored row.
        """
        merged = await self.session.merge(entity)
        await self.session.commit()
        await self.session.refresh(merged)
        return merged

    async def delete(self, entity: EntityType) -> None:
        await self.session.delete(entity)
        await self.session.commit()
