"""Tests for the body size middleware and shared exceptions."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from src.exceptions import PayloadTooLargeError, UtilityAPIError
from src.middleware import MaxBodySizeMiddleware


@pytest.fixture
def small_client():
    app = FastAPI()
    app.add_middleware(MaxBodySizeMiddleware, max_body_size=16)

    @app.post("/echo")
    async def echo(request: Request):
        body = await request.body()
        return {"size": len(body)}

    return TestClient(app)


class TestMaxBodySizeMiddleware:
    """Tests for MaxBodySizeMiddleware."""

    def test_small_body_passes(self, small_client):
        response = small_client.post("/echo", content=b"x" * 16)

        assert response.status_code == 200
        assert response.json() == {"size": 16}

    def test_large_body_rejected(self, small_client):
        """Test a body over the limit is rejected with 413."""
        response = small_client.post("/echo", content=b"x" * 17)

        assert response.status_code == 413
        assert response.json()["error"] == "PAYLOAD_TOO_LARGE"


class TestExceptions:
    """Tests for shared exception types."""

    def test_base_error_defaults_code_to_class_name(self):
        exc = UtilityAPIError("boom")

        assert exc.code == "UtilityAPIError"
        assert exc.status_code == 500
        assert exc.to_payload() == {"error": "UtilityAPIError", "message": "boom"}

    def test_payload_too_large_messages(self):
        assert "200 bytes" in PayloadTooLargeError(max_bytes=100, size_bytes=200).message
        assert PayloadTooLargeError(max_bytes=100).status_code == 413
