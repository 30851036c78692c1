"""
Middleware modules for the UCSB example API server.
"""

from .authentication import BearerTokenGateMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = ["BearerTokenGateMiddleware", "RequestLoggingMiddleware"]
