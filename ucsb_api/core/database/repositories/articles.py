"""Article repository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.articles import Article
from .base import SqlModelRepository


class ArticleRepository(SqlModelRepository[Article]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Article)
