"""
Core utilities for the UCSB example API.

This package provides logging configuration, the shared error types and the
database layer used by the web server.
"""

from ucsb_api.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
