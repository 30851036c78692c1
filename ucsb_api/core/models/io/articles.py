"""
Article I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class ArticleWrite(CamelModel):
    """Schema for the JSON body of an article update."""

    title: str = Field(description="Article title")
    url: str = Field(description="Link to the article")
    explanation: str = Field(description="Why the article is worth reading")
    email: str = Field(description="Email of the person who added the article")
    date_added: datetime = Field(description="When the article was added (ISO-8601)")


class ArticleRead(ArticleWrite):
    """Schema for reading an article from the API."""

    id: Optional[int] = None
