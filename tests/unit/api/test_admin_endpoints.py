"""Unit tests for admin and stats API endpoints

Tests the /stats/* and /admin/cache/* endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from pexels_cache.api.app import create_app

# ========================================
# Fixtures
# ========================================


@pytest.fixture
def admin_test_client(repository, catalog):
    """FastAPI TestClient with one cached query and one favorite"""
    catalog.add_page("nature", 1, [1, 2, 3])
    repository.search_photos("nature")
    repository.toggle_favorite(1)
    yield TestClient(create_app(repository))


# ========================================
# Tests for /stats endpoints
# ========================================


class TestStatsEndpoints:
    """Tests for /stats/* GET endpoints"""

    def test_health_check(self, admin_test_client):
        """Test /stats/health endpoint"""
        response = admin_test_client.get("/stats/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "version" in data


# ========================================
# Tests for /admin/cache endpoints
# ========================================


class TestAdminCacheEndpoints:
    """Tests for /admin/cache/* endpoints"""

    def test_cache_stats(self, admin_test_client):
        response = admin_test_client.get("/admin/cache/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["total_records"] == 3
        assert data["favorite_records"] == 1
        assert data["last_query"] == "nature"
        assert data["last_query_records"] == 3

    def test_clear_cache(self, admin_test_client):
        """Test /admin/cache/clear endpoint"""
        response = admin_test_client.post("/admin/cache/clear")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["deleted"] == 2
        assert admin_test_client.get("/favorites").json()["count"] == 1

    def test_refresh_cache(self, admin_test_client):
        response = admin_test_client.post("/admin/cache/refresh", json={"query": " Nature "})

        assert response.json() == {"success": True, "deleted": 2}

    def test_refresh_cache_including_favorites(self, admin_test_client):
        response = admin_test_client.post(
            "/admin/cache/refresh", json={"query": "nature", "include_favorites": True}
        )

        assert response.json()["deleted"] == 3

    def test_refresh_cache_strips_html(self, admin_test_client):
        response = admin_test_client.post("/admin/cache/refresh", json={"query": "<b>nature</b>"})

        assert response.json()["deleted"] == 2

    def test_refresh_cache_validation(self, admin_test_client):
        assert admin_test_client.post("/admin/cache/refresh", json={}).status_code == 422
        assert admin_test_client.post("/admin/cache/refresh", json={"query": ""}).status_code == 422
