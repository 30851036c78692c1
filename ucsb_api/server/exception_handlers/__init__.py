"""
Exception handlers for the UCSB example API server.

This package contains custom exception handlers for different error types
and a setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI

from ucsb_api.core.errors import EntityNotFoundException
from ucsb_api.core.logging_config import get_logger

from .global_handler import global_exception_handler
from .not_found_handler import entity_not_found_handler

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(EntityNotFoundException, entity_not_found_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = ["entity_not_found_handler", "global_exception_handler", "setup_exception_handlers"]
