"""
Unit tests for the request logging middleware.
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ucsb_api.server.middleware import RequestLoggingMiddleware

pytestmark = pytest.mark.asyncio


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    return app


async def test_adds_process_time_header(app: FastAPI):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        response = await client.get("/ping")

    assert response.status_code == 200
    assert float(response.headers["X-Process-Time"]) >= 0


async def test_logs_method_path_and_status(app: FastAPI):
    with patch("ucsb_api.server.middleware.request_logging.logger") as mock_logger:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            await client.get("/ping")

    message = mock_logger.info.call_args[0][0]
    assert message.startswith("GET /ping -> 200")


async def test_logs_and_reraises_failures(app: FastAPI):
    with patch("ucsb_api.server.middleware.request_logging.logger") as mock_logger:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
            with pytest.raises(RuntimeError):
                await client.get("/boom")

    mock_logger.error.assert_called_once()
    assert "API request failed: GET /boom" in mock_logger.error.call_args[0][0]
