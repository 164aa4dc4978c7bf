"""Tests for the health, system, users and echo endpoints."""

from unittest.mock import patch

import pytest

from src.system.service import SAMPLE_USERS, get_system_info, list_users, process_uptime


class TestSystemService:
    """Tests for introspection helpers."""

    def test_process_uptime_non_negative(self):
        assert process_uptime() >= 0

    def test_system_info_memory_strings(self):
        """Test memory figures are rendered as whole megabytes."""
        info = get_system_info()

        for value in (info.memory.total, info.memory.free, info.memory.usage):
            number, unit = value.split(" ")
            assert number.isdigit()
            assert unit == "MB"
        assert info.uptime.endswith(" seconds")
        assert info.cpus >= 0

    def test_list_users(self):
        response = list_users()

        assert response.count == len(SAMPLE_USERS) == 4
        assert response.users[0].name == "Alice Johnson"


class TestSystemRoutes:
    """Route-level tests for the system router."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["server"] == "FastAPI"
        assert body["uptime"] >= 0
        assert body["timestamp"].endswith("Z")

    def test_users(self, client):
        response = client.get("/api/users")

        assert response.status_code == 200
        assert response.json()["count"] == 4

    def test_system(self, client):
        response = client.get("/api/system")

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {
            "platform", "arch", "python_version", "memory", "uptime", "cpus", "hostname"
        }

    def test_echo_json(self, client):
        """Test echo reflects the body, method and headers."""
        response = client.post(
            "/api/echo", json={"hello": "world"}, headers={"X-Trace": "abc"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["received"] == {"hello": "world"}
        assert body["method"] == "POST"
        assert body["headers"]["x-trace"] == "abc"

    @pytest.mark.parametrize("payload", [[1, 2, 3], "plain", 42])
    def test_echo_any_json(self, client, payload):
        """Test echo does not validate the body shape."""
        response = client.post("/api/echo", json=payload)

        assert response.json()["received"] == payload

    def test_echo_malformed_json(self, client):
        response = client.post(
            "/api/echo", content=b"{", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400


def test_system_uses_psutil_figures(client):
    """Test memory values come from psutil."""
    fake = type("VM", (), {"total": 8 * 1024 * 1024 * 1024, "available": 512 * 1024 * 1024})()
    with patch("src.system.service.psutil.virtual_memory", return_value=fake):
        response = client.get("/api/system")

    memory = response.json()["memory"]
    assert memory["total"] == "8192 MB"
    assert memory["free"] == "512 MB"
