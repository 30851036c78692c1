"""
Bearer Token Gate Middleware.

Rejects calls to the ``/api`` endpoints with HTTP 403 before the request body
is read, so a caller without a valid token (or without the role a write needs)
never sees a validation error. The route-level role dependencies still run
afterwards and remain the source of truth for each endpoint.
"""

from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.security.utils import get_authorization_scheme_param
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ucsb_api.core.logging_config import get_logger
from ucsb_api.server.core.constant import API_PREFIX, ROLE_ADMIN, ROLE_USER
from ucsb_api.server.services.auth import decode_access_token

logger = get_logger(__name__)

READ_METHODS = frozenset({"GET", "HEAD"})


def required_role(method: str) -> str:
    """Role needed for an ``/api`` call made with ``method``."""
    return ROLE_USER if method.upper() in READ_METHODS else ROLE_ADMIN


class BearerTokenGateMiddleware(BaseHTTPMiddleware):
    """Middleware that checks the bearer token ahead of body parsing."""

    def __init__(self, app, prefix: str = API_PREFIX) -> None:
        super().__init__(app)
        self.prefix = prefix.rstrip("/")

    def _guards(self, request: Request) -> bool:
        path = request.url.path
        if request.method == "OPTIONS":
            return False
        return path == self.prefix or path.startswith(f"{self.prefix}/")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self._guards(request):
            return await call_next(request)

        scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
        if scheme.lower() != "bearer" or not token:
            return self._forbidden(request, "Not authenticated")

        user = decode_access_token(token)
        if user is None:
            return self._forbidden(request, "Invalid authentication token")

        role = required_role(request.method)
        if not user.has_role(role):
            return self._forbidden(request, f"{role} required")

        request.state.user = user
        return await call_next(request)

    @staticmethod
    def _forbidden(request: Request, detail: str) -> JSONResponse:
        logger.debug(f"Rejected {request.method} {request.url.path}: {detail}")
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": detail})
