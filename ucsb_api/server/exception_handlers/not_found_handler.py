"""
Handler for records that do not exist.

Answers HTTP 404 with ``{"type": ..., "message": ...}`` where ``type`` is the
exception class name and ``message`` reads ``"<Entity> with id <id> not found"``.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.logging_config import get_logger

logger = get_logger(__name__)


async def entity_not_found_handler(request: Request, exc: EntityNotFoundException) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"type": type(exc).__name__, "message": exc.message},
    )
