"""
Tests for the HTTP API
======================
Stateless analysis, document sessions, error mapping and middleware.
"""

from fastapi.testclient import TestClient

from wordlens.config import Settings
from wordlens.engine.constants import KEYWORD_MARKER_CLOSE, KEYWORD_MARKER_OPEN, SEARCH_MARKER_OPEN
from wordlens.server import create_app

DOCUMENT = b"Respect and inclusion matter.\n\nInclusion drives respect.\nCats are not a category."


def _upload(client, filename: str = "values.txt", data: bytes = DOCUMENT):
    return client.post("/v1/documents", files={"file": (filename, data, "text/plain")})


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["name"] == "WordLens"

    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"
        assert "x-request-id" in response.headers
        assert "strict-transport-security" not in response.headers


class TestAnalyze:
    def test_counts_and_markup(self, client):
        response = client.post(
            "/v1/analyze",
            json={
                "content": "Respect and inclusion matter. Inclusion drives respect.",
                "keywords": [{"word": "respect"}],
            },
        )
        assert response.status_code == 200
        body = response.json()

        assert body["counts"] == {"respect": 2}
        opening = KEYWORD_MARKER_OPEN.format(color="#fbbf24")
        assert body["renderable_content"].count(opening) == 2
        assert body["stats"] == {"characters": 55, "words": 7, "lines": 1}
        assert [s["start"] for s in body["spans"]] == [0, 47]

    def test_highlight_disabled(self, client):
        response = client.post(
            "/v1/analyze",
            json={
                "content": "cat category catalog",
                "keywords": [{"word": "cat"}],
                "highlight_enabled": False,
            },
        )
        body = response.json()
        assert body["counts"] == {"cat": 1}
        assert body["renderable_content"] == "cat category catalog"

    def test_rtf_content(self, client):
        response = client.post(
            "/v1/analyze",
            json={"content": r"{\rtf1\ansi Hello\par World}", "keywords": [{"word": "world"}]},
        )
        body = response.json()
        assert body["normalized_content"] == "Hello\nWorld"
        assert body["counts"] == {"world": 1}

    def test_duplicate_keyword_conflict(self, client):
        response = client.post(
            "/v1/analyze",
            json={"content": "x", "keywords": [{"word": "Respect"}, {"word": "respect "}]},
        )
        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "Keyword already exists: respect"}

    def test_blank_keyword_rejected(self, client):
        response = client.post("/v1/analyze", json={"content": "x", "keywords": [{"word": "   "}]})
        assert response.status_code == 422
        assert response.json()["error"] == "Please enter a keyword"

    def test_bad_color_rejected(self, client):
        response = client.post(
            "/v1/analyze",
            json={"content": "x", "keywords": [{"word": "x", "color": '"><script>'}]},
        )
        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_normalize(self, client):
        response = client.post("/v1/normalize", json={"content": r"{\rtf1 A\emdash B}"})
        assert response.json() == {"content": "A—B", "is_rtf": True}


class TestDocuments:
    def test_full_flow(self, client):
        response = _upload(client)
        assert response.status_code == 201
        info = response.json()
        session_id = info["id"]
        assert info["state"] == "idle"
        assert info["file_type"] == "Plain Text"
        assert info["line_count"] == 3

        response = client.post(f"/v1/documents/{session_id}/keywords", json={"word": "Respect"})
        assert response.status_code == 201
        keyword = response.json()
        assert (keyword["word"], keyword["count"]) == ("respect", 2)

        response = client.post(f"/v1/documents/{session_id}/keywords", json={"word": "respect"})
        assert response.status_code == 409

        response = client.post(f"/v1/documents/{session_id}/keywords", json={"word": "cat"})
        assert response.json()["count"] == 0

        lines = client.get(f"/v1/documents/{session_id}/lines", params={"start": 1, "stop": 2})
        body = lines.json()
        assert body["total_lines"] == 3
        assert [line["index"] for line in body["lines"]] == [1]
        assert KEYWORD_MARKER_CLOSE in body["lines"][0]["html"]
        assert body["counts"] == {"respect": 2, "cat": 0}

        response = client.put(f"/v1/documents/{session_id}/options", json={"case_sensitive": True})
        assert response.json()["keywords"][0]["count"] == 1

        search = client.get(f"/v1/documents/{session_id}/search", params={"q": "inclusion"})
        assert search.json() == {"query": "inclusion", "matches": [0, 1], "total": 2, "current": 0}

        density = client.get(f"/v1/documents/{session_id}/density").json()
        assert [d["word"] for d in density] == ["respect"]

        suggestions = client.get(f"/v1/documents/{session_id}/suggestions").json()
        assert "respect" not in suggestions["suggestions"]
        assert "inclusion" in suggestions["suggestions"]

        response = client.delete(f"/v1/documents/{session_id}/keywords/{keyword['id']}")
        assert [k["word"] for k in response.json()["keywords"]] == ["cat"]

        assert client.delete(f"/v1/documents/{session_id}").status_code == 204
        assert client.get(f"/v1/documents/{session_id}").status_code == 404

    def test_highlight_toggle_keeps_counts(self, client):
        session_id = _upload(client).json()["id"]
        client.post(f"/v1/documents/{session_id}/keywords", json={"word": "respect"})

        client.put(f"/v1/documents/{session_id}/options", json={"highlight_enabled": False})
        body = client.get(f"/v1/documents/{session_id}/lines").json()

        assert body["counts"] == {"respect": 2}
        assert all(line["html"] == line["text"] for line in body["lines"])

    def test_search_overlay(self, client):
        session_id = _upload(client).json()["id"]
        body = client.get(
            f"/v1/documents/{session_id}/lines", params={"search": "drives"}
        ).json()
        assert SEARCH_MARKER_OPEN in body["lines"][1]["html"]

    def test_search_cursor_navigation(self, client):
        session_id = _upload(client).json()["id"]
        client.get(f"/v1/documents/{session_id}/search", params={"q": "respect"})

        forward = client.post(f"/v1/documents/{session_id}/search/next")
        assert forward.status_code == 200
        assert forward.json()["current"] == 1

        wrapped = client.post(f"/v1/documents/{session_id}/search/next")
        assert wrapped.json()["current"] == 0

        back = client.post(f"/v1/documents/{session_id}/search/prev")
        assert back.json() == {"query": "respect", "matches": [0, 1], "total": 2, "current": 1}

    def test_search_cursor_without_search(self, client):
        session_id = _upload(client).json()["id"]
        response = client.post(f"/v1/documents/{session_id}/search/next")
        assert response.json() == {"query": "", "matches": [], "total": 0, "current": None}

    def test_unknown_keyword(self, client):
        session_id = _upload(client).json()["id"]
        response = client.delete(f"/v1/documents/{session_id}/keywords/missing")
        assert response.status_code == 404

    def test_unsupported_file_type(self, client):
        response = _upload(client, filename="image.png", data=b"\x89PNG")
        assert response.status_code == 415
        assert response.json()["success"] is False

    def test_upload_too_large(self):
        settings = Settings(debug=True, max_upload_bytes=8)
        with TestClient(create_app(settings)) as client:
            response = _upload(client)
        assert response.status_code == 413

    def test_unknown_session(self, client):
        response = client.get("/v1/documents/does-not-exist")
        assert response.status_code == 404
        assert response.json()["success"] is False


class TestRateLimit:
    def test_limit_exceeded(self):
        settings = Settings(debug=True, ip_rate_limit_requests=2)
        with TestClient(create_app(settings)) as client:
            for _ in range(2):
                assert client.post("/v1/normalize", json={"content": "x"}).status_code == 200

            response = client.post("/v1/normalize", json={"content": "x"})
            assert response.status_code == 429
            assert response.json()["success"] is False

            assert client.get("/health").status_code == 200

    def test_limit_per_application(self):
        """Each application gets its own limiter."""
        settings = Settings(debug=True, ip_rate_limit_requests=1)
        for _ in range(2):
            with TestClient(create_app(settings)) as client:
                assert client.post("/v1/normalize", json={"content": "x"}).status_code == 200
