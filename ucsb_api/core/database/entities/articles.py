"""
Article entity models.

Articles are links shared with the class, each with a short explanation
and the email of whoever added it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base


class ArticleBase(Base):
    """Base fields for articles."""

    title: str = Field(description="Article title")
    url: str = Field(description="Link to the article")
    explanation: str = Field(description="Why the article is worth reading")
    email: str = Field(description="Email of the person who added the article")
    date_added: datetime = Field(sa_type=DateTime(timezone=False), description="When the article was added")


class Article(ArticleBase, table=True):
    """Persistent article.

    Table: articles
    """

    __tablename__ = "articles"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
