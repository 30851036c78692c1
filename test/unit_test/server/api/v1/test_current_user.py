"""
Unit tests for the current user endpoint.
"""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_logged_out_users_cannot_get_current_user(client: AsyncClient):
    response = await client.get("/api/currentUser")
    assert response.status_code == 403


async def test_logged_in_user_gets_email_and_roles(client: AsyncClient, auth_headers):
    response = await client.get("/api/currentUser", headers=auth_headers("USER", email="cgaucho@ucsb.edu"))
    assert response.status_code == 200
    assert response.json() == {"email": "cgaucho@ucsb.edu", "roles": ["ROLE_USER"]}


async def test_admin_roles_are_reported(client: AsyncClient, admin_headers):
    response = await client.get("/api/currentUser", headers=admin_headers)
    assert response.status_code == 200
    assert set(response.json()["roles"]) == {"ROLE_ADMIN", "ROLE_USER"}


async def test_admin_without_user_role_is_forbidden(client: AsyncClient, auth_headers):
    response = await client.get("/api/currentUser", headers=auth_headers("ADMIN"))
    assert response.status_code == 403
