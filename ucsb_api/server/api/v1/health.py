"""
Health and version endpoints.

Both are public. ``/health`` also runs a trivial query so a deployment monitor
notices when the database is unreachable.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ucsb_api.core.logging_config import get_logger
from ucsb_api.server.core import constant
from ucsb_api.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    response_description="Server and database status.",
    responses={503: {"description": "Database unreachable"}},
)
async def health_check(session: SessionDep):
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: database unreachable: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "unreachable"},
        )
    return {"status": "ok", "database": "ok"}


@router.get("/version", summary="Get Version")
async def version():
    return {
        "name": constant.PROJECT_NAME,
        "version": constant.API_VERSION,
        "schema_version": constant.SCHEMA_VERSION,
    }
