"""Unit tests for bearer token authentication and role checks."""

from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from ucsb_api.server.core.config import settings
from ucsb_api.server.services.auth import (
    CurrentUser,
    create_access_token,
    decode_access_token,
    get_current_user,
    normalize_role,
    require_admin,
    require_role,
    require_user,
)


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestNormalizeRole:
    @pytest.mark.parametrize(
        "role, expected",
        [
            ("USER", "ROLE_USER"),
            ("admin", "ROLE_ADMIN"),
            ("ROLE_ADMIN", "ROLE_ADMIN"),
            (" role_user ", "ROLE_USER"),
        ],
    )
    def test_normalize_role(self, role, expected):
        assert normalize_role(role) == expected


class TestCurrentUser:
    def test_has_role_accepts_either_form(self):
        user = CurrentUser(email="cgaucho@ucsb.edu", roles=["ROLE_USER"])
        assert user.has_role("USER")
        assert user.has_role("ROLE_USER")
        assert not user.has_role("ADMIN")


class TestTokens:
    def test_round_trip_preserves_subject_and_roles(self):
        token = create_access_token("cgaucho@ucsb.edu", ["USER", "ADMIN"])

        user = decode_access_token(token)

        assert user is not None
        assert user.email == "cgaucho@ucsb.edu"
        assert user.roles == ["ROLE_USER", "ROLE_ADMIN"]

    def test_expired_token_is_rejected(self):
        token = create_access_token("cgaucho@ucsb.edu", ["USER"], expires_delta=timedelta(seconds=-1))
        assert decode_access_token(token) is None

    def test_token_signed_with_other_secret_is_rejected(self):
        token = jwt.encode({"sub": "cgaucho@ucsb.edu", "roles": ["ROLE_USER"]}, "another-secret", algorithm="HS256")
        assert decode_access_token(token) is None

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode({"roles": ["ROLE_USER"]}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
        assert decode_access_token(token) is None

    def test_single_role_string_is_accepted(self):
        token = jwt.encode(
            {"sub": "cgaucho@ucsb.edu", "roles": "USER"}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
        )
        user = decode_access_token(token)
        assert user is not None
        assert user.roles == ["ROLE_USER"]

    def test_garbage_is_rejected(self):
        assert decode_access_token("not.a.token") is None


@pytest.mark.asyncio
class TestDependencies:
    async def test_missing_credentials_are_forbidden(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(None)
        assert exc_info.value.status_code == 403

    async def test_invalid_token_is_forbidden(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(_credentials("bogus"))
        assert exc_info.value.status_code == 403

    async def test_valid_token_resolves_user(self):
        user = await get_current_user(_credentials(create_access_token("cgaucho@ucsb.edu", ["USER"])))
        assert user.email == "cgaucho@ucsb.edu"

    async def test_require_admin_rejects_regular_user(self):
        user = CurrentUser(email="cgaucho@ucsb.edu", roles=["ROLE_USER"])
        with pytest.raises(HTTPException) as exc_info:
            await require_admin(user)
        assert exc_info.value.status_code == 403
        assert "ROLE_ADMIN" in exc_info.value.detail

    async def test_require_admin_admits_admin(self):
        user = CurrentUser(email="phtcon@ucsb.edu", roles=["ROLE_ADMIN"])
        assert await require_admin(user) is user

    async def test_require_user_admits_user(self):
        user = CurrentUser(email="cgaucho@ucsb.edu", roles=["ROLE_USER"])
        assert await require_user(user) is user

    async def test_require_role_names_the_dependency(self):
        assert require_role("DRIVER").__name__ == "require_role_driver"


class TestGroupedJwtConfig:
    def test_tokens_follow_the_configured_secret(self, monkeypatch):
        token = create_access_token("cgaucho@ucsb.edu", ["USER"])
        monkeypatch.setattr(settings, "jwt_secret_key", "rotated-secret")

        assert decode_access_token(token) is None
        assert decode_access_token(create_access_token("cgaucho@ucsb.edu", ["USER"])) is not None

    def test_expiry_comes_from_configuration(self, monkeypatch):
        monkeypatch.setattr(settings, "jwt_access_token_expire_minutes", 5)

        claims = jwt.get_unverified_claims(create_access_token("cgaucho@ucsb.edu", ["USER"]))

        assert claims["exp"] - claims["iat"] == 5 * 60
