"""
Bearer token authentication and role checks.

Identity is established outside this service: callers present a signed JWT
whose ``sub`` claim is their email and whose ``roles`` claim lists their
authorization labels (``ROLE_USER``, ``ROLE_ADMIN``). This module verifies the
token and exposes FastAPI dependencies that gate endpoints by role.

Every failure (no token, bad token, missing role) answers HTTP 403, matching
how the web front end expects a logged-out caller to be treated.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel, Field

from ucsb_api.core.logging_config import get_logger
from ucsb_api.server.core.config import settings
from ucsb_api.server.core.constant import ROLE_ADMIN, ROLE_USER

logger = get_logger(__name__)

# HTTP Bearer token scheme; missing credentials are handled below
security = HTTPBearer(auto_error=False)


def normalize_role(role: str) -> str:
    """Return ``role`` with the ``ROLE_`` prefix, upper-cased."""
    role = role.strip().upper()
    return role if role.startswith("ROLE_") else f"ROLE_{role}"


class CurrentUser(BaseModel):
    """The authenticated caller."""

    email: str
    roles: List[str] = Field(default_factory=list)

    def has_role(self, role: str) -> bool:
        return normalize_role(role) in {normalize_role(r) for r in self.roles}


def create_access_token(
    email: str,
    roles: Iterable[str],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Issue a signed access token.

    Args:
        email: Subject of the token
        roles: Roles granted to the subject
        expires_delta: Token lifetime (defaults to the configured expiry)

    Returns:
        Encoded JWT string
    """
    jwt_config = settings.jwt
    if expires_delta is None:
        expires_delta = timedelta(minutes=jwt_config.access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    claims = {
        "sub": email,
        "roles": [normalize_role(r) for r in roles],
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(claims, jwt_config.secret_key, algorithm=jwt_config.algorithm)


def decode_access_token(token: str) -> Optional[CurrentUser]:
    """
    Verify a token and build the caller it describes.

    Returns:
        The caller, or None when the token is invalid, expired or has no subject
    """
    jwt_config = settings.jwt
    try:
        payload = jwt.decode(token, jwt_config.secret_key, algorithms=[jwt_config.algorithm])
    except JWTError as e:
        logger.debug(f"Token rejected: {e}")
        return None

    email = payload.get("sub")
    if not email:
        logger.debug("Token rejected: missing subject")
        return None

    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]
    return CurrentUser(email=email, roles=[normalize_role(r) for r in roles])


def _forbidden(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 403 if the header is missing or the token is invalid
    """
    if credentials is None:
        logger.debug("Request without credentials")
        raise _forbidden("Not authenticated")

    user = decode_access_token(credentials.credentials)
    if user is None:
        logger.warning("Request with invalid access token")
        raise _forbidden("Invalid authentication token")
    return user


def require_role(role: str):
    """Build a dependency that admits only callers holding ``role``."""
    required = normalize_role(role)

    async def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if not current_user.has_role(required):
            logger.warning(f"Access denied for {current_user.email}: {required} required, has {current_user.roles}")
            raise _forbidden(f"{required} required")
        return current_user

    dependency.__name__ = f"require_{required.lower()}"
    return dependency


require_user = require_role(ROLE_USER)
require_admin = require_role(ROLE_ADMIN)
