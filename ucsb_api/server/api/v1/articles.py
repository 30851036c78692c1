"""
API endpoints for articles shared with the class.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query

from ucsb_api.core.database.entities import Article
from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.logging_config import get_logger
from ucsb_api.core.models.io import ArticleRead, ArticleWrite, ErrorResponse, GenericMessage
from ucsb_api.server.core.constant import MAX_ENTITY_ID, MIN_ENTITY_ID
from ucsb_api.server.services.auth import require_admin, require_user
from ucsb_api.server.services.deps import ArticleRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["Articles"])


@router.get(
    "/all",
    response_model=List[ArticleRead],
    dependencies=[Depends(require_user)],
    summary="List all articles",
)
async def all_articles(repository: ArticleRepoDep) -> List[ArticleRead]:
    articles = await repository.find_all()
    return [ArticleRead.model_validate(a) for a in articles]


@router.get(
    "",
    response_model=ArticleRead,
    dependencies=[Depends(require_user)],
    summary="Get a single article",
    responses={404: {"model": ErrorResponse, "description": "Article not found"}},
)
async def get_article(
    repository: ArticleRepoDep,
    entity_id: int = Query(alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the article"),
) -> ArticleRead:
    article = await repository.find_by_id(entity_id)
    if article is None:
        raise EntityNotFoundException(Article, entity_id)
    return ArticleRead.model_validate(article)


@router.post(
    "/post",
    response_model=ArticleRead,
    dependencies=[Depends(require_admin)],
    summary="Create a new article",
)
async def post_article(
    repository: ArticleRepoDep,
    title: str = Query(),
    url: str = Query(),
    explanation: str = Query(),
    email: str = Query(),
    date_added: datetime = Query(
        alias="dateAdded",
        description="date (in iso format, e.g. YYYY-mm-ddTHH:MM:SS; see https://en.wikipedia.org/wiki/ISO_8601)",
    ),
) -> ArticleRead:
    """
    Create a new article.

    - **title**, **url**, **explanation**, **email**: Article details.
    - **dateAdded**: ISO-8601 local date-time the article was added.
    """
    logger.info(f"dateAdded={date_added.isoformat()}")

    article = Article(
        title=title,
        url=url,
        explanation=explanation,
        email=email,
        date_added=date_added,
    )
    saved = await repository.save(article)
    return ArticleRead.model_validate(saved)


@router.put(
    "",
    response_model=ArticleRead,
    dependencies=[Depends(require_admin)],
    summary="Update a single article",
    responses={404: {"model": ErrorResponse, "description": "Article not found"}},
)
async def update_article(
    incoming: ArticleWrite,
    repository: ArticleRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the article to update"
    ),
) -> ArticleRead:
    """
    Update an article.

    Every field of the stored article is replaced by the one in the body.
    """
    article = await repository.find_by_id(entity_id)
    if article is None:
        raise EntityNotFoundException(Article, entity_id)

    article.title = incoming.title
    article.url = incoming.url
    article.explanation = incoming.explanation
    article.email = incoming.email
    article.date_added = incoming.date_added

    await repository.save(article)
    return ArticleRead.model_validate(article)


@router.delete(
    "",
    response_model=GenericMessage,
    dependencies=[Depends(require_admin)],
    summary="Delete an article",
    responses={404: {"model": ErrorResponse, "description": "Article not found"}},
)
async def delete_article(
    repository: ArticleRepoDep,
    entity_id: int = Query(
        alias="id", ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="Id of the article to delete"
    ),
) -> GenericMessage:
    article = await repository.find_by_id(entity_id)
    if article is None:
        raise EntityNotFoundException(Article, entity_id)

    await repository.delete(article)
    return GenericMessage(message=f"Article with id {entity_id} deleted")
