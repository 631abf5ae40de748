"""
Phonebook Backend: Frontend Static Files & Health Tests
==========================================================

What we test:
    ✅ "/" serves index.html from the build directory
    ✅ Nested assets are served
    ✅ Missing files and traversal attempts fall through to "unknown endpoint"
    ✅ API routes win over the catch-all
    ✅ /health reports database status
"""

import pytest
from fastapi import HTTPException

from phonebook.routes.static import resolve_static_file


class TestResolveStaticFile:

    def test_root_maps_to_index(self, static_root):
        assert resolve_static_file("", str(static_root)) == (static_root / "index.html").resolve()

    def test_directory_maps_to_its_index(self, static_root):
        (static_root / "docs").mkdir()
        (static_root / "docs" / "index.html").write_text("docs")

        assert resolve_static_file("docs", str(static_root)).name == "index.html"

    def test_traversal_rejected(self, static_root, tmp_path):
        (tmp_path / "secret.txt").write_text("nope")

        with pytest.raises(HTTPException) as exc_info:
            resolve_static_file("../secret.txt", str(static_root))
        assert exc_info.value.status_code == 404

    def test_missing_root(self, tmp_path):
        with pytest.raises(HTTPException):
            resolve_static_file("index.html", str(tmp_path / "no-build"))


class TestStaticRoute:

    @pytest.mark.asyncio
    async def test_index(self, test_client, static_root):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert "phonebook" in response.text

    @pytest.mark.asyncio
    async def test_asset(self, test_client, static_root):
        response = await test_client.get("/static/main.js")

        assert response.status_code == 200
        assert response.text == "console.log('phonebook')"

    @pytest.mark.asyncio
    async def test_missing_asset(self, test_client, static_root):
        response = await test_client.get("/static/missing.js")

        assert response.status_code == 404
        assert response.json() == {"error": "unknown endpoint"}

    @pytest.mark.asyncio
    async def test_api_routes_take_precedence(self, test_client, static_root):
        (static_root / "info").write_text("not the info page")

        response = await test_client.get("/info")

        assert "Phonebook has info for" in response.text


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_status(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] in {"healthy", "unhealthy"}
        assert body["database"] in {"connected", "disconnected"}
        assert body["version"] == "1.0.0"
