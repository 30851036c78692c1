"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (bearer token gate, CORS,
request logging), registers exception handlers and includes all API routers.
It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ucsb_api.core.logging_config import get_logger, setup_logging

from .api.v1 import (
    articles,
    current_user,
    dining_commons_menu_items,
    health,
    help_requests,
    menu_item_reviews,
    organizations,
)
from .core import constant
from .core.config import settings
from .core.database import dispose_engine, init_db
from .exception_handlers import setup_exception_handlers
from .middleware import BearerTokenGateMiddleware, RequestLoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup and releases pooled connections on shutdown.
    """
    logger.info("Starting up UCSB example API server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down UCSB example API server...")
    await dispose_engine()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    UCSB Example API

    CRUD endpoints for help requests, dining commons menu items and reviews,
    articles and student organizations. Reads require ROLE_USER; creating,
    updating and deleting records requires ROLE_ADMIN.
    """,
    version=constant.API_VERSION,
    lifespan=lifespan,
)

# Added innermost first: the token gate runs after CORS and request logging
app.add_middleware(BearerTokenGateMiddleware)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)

setup_exception_handlers(app)

api = constant.API_PREFIX
app.include_router(health.router, tags=["health"])
app.include_router(current_user.router, prefix=f"{api}/currentUser")
app.include_router(help_requests.router, prefix=f"{api}/helprequest")
app.include_router(menu_item_reviews.router, prefix=f"{api}/menuitemreview")
app.include_router(dining_commons_menu_items.router, prefix=f"{api}/UCSBDiningCommonsMenuItems")
app.include_router(articles.router, prefix=f"{api}/articles")
app.include_router(organizations.router, prefix=f"{api}/ucsborganization")
