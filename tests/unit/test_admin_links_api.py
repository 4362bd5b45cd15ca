"""
Integration tests for admin links API endpoints.

Tests the HTTP layer including the session gate, validation envelopes and
render cache invalidation.
"""

from src.adapters.render_cache import RenderCache

LINK = {
    "name": "Example",
    "url": "https://example.com",
    "desc": "An example",
    "category1": "Dev",
    "category2": "Tools",
    "tags": ["demo"],
    "isAdminOnly": True,
}


class TestCreateLinkAuth:
    def test_requires_session(self, client, fake_source):
        response = client.post("/api/links", json=LINK)

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized, please log in first"}
        assert fake_source.created == []

    def test_auth_checked_before_body(self, client):
        response = client.post("/api/links", json={"url": 42})
        assert response.status_code == 401


class TestCreateLink:
    def test_success(self, admin_client, fake_source):
        response = admin_client.post("/api/links", json=LINK)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Link added", "id": "new-1"}

        database_id, properties = fake_source.created[0]
        assert database_id == "links-db"
        assert properties["Name"]["title"][0]["text"]["content"] == "Example"
        assert properties["URL"] == {"url": "https://example.com"}
        assert properties["isAdmin"] == {"checkbox": True}
        assert properties["Tags"] == {"multi_select": [{"name": "demo"}]}

    def test_invalid_url(self, admin_client, fake_source):
        response = admin_client.post("/api/links", json={"name": "Bad", "url": "not-a-url"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "URL format is invalid"}
        assert fake_source.created == []

    def test_long_name_accepted(self, admin_client, fake_source):
        response = admin_client.post(
            "/api/links", json={"name": "x" * 250, "url": "https://example.com"}
        )

        assert response.status_code == 200
        assert len(fake_source.created) == 1

    def test_missing_fields(self, admin_client):
        response = admin_client.post("/api/links", json={"url": "https://example.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Name is required"

    def test_malformed_body_is_400(self, admin_client):
        response = admin_client.post("/api/links", json={"name": "x", "url": "https://x.io", "tags": 5})

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_upstream_failure_is_500(self, admin_client, fake_source):
        fake_source.failing.add("links-db")

        response = admin_client.post("/api/links", json=LINK)

        assert response.status_code == 500
        assert response.json()["success"] is False

    def test_links_db_unset_is_500(self, admin_client, settings):
        settings.links_db_id = None

        response = admin_client.post("/api/links", json=LINK)

        assert response.status_code == 500

    def test_invalidates_navigation_cache(
        self, admin_client, fake_source, render_cache: RenderCache
    ):
        admin_client.get("/api/navigation")
        fetches = fake_source.fetch_count

        admin_client.post("/api/links", json=LINK)
        admin_client.get("/api/navigation")

        assert render_cache.last_invalidated_at is not None
        assert fake_source.fetch_count > fetches
