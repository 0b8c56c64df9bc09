"""API tests for the game data endpoints."""
import re
from unittest.mock import MagicMock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from gamedata.cache import DailyCache
from gamedata.service import GameDataService
from tests.conftest import make_page
from ui.app import DEFAULT_ALLOWED_ORIGINS, _allowed_origins, create_app


@pytest.fixture
def fetcher():
    return MagicMock()


@pytest.fixture
def client(fetcher):
    service = GameDataService(
        cache=DailyCache(),
        fetcher=fetcher,
        url="https://example.test/puzzles/letter-boxed",
        headers={"User-Agent": "test-agent"},
    )
    app = create_app(service=service, allowed_origins=["http://localhost:5173"])
    return TestClient(app)


def test_get_nyt_returns_payload(client, fetcher, page, game_data):
    # Arrange
    fetcher.return_value = page

    # Act
    response = client.get("/api/nyt")

    # Assert
    assert response.status_code == 200
    assert response.json() == game_data


def test_get_nyt_serves_cache_on_second_request(client, fetcher, page, game_data):
    fetcher.return_value = page

    client.get("/api/nyt")
    response = client.get("/api/nyt")

    assert response.status_code == 200
    assert response.json() == game_data
    fetcher.assert_called_once()


def test_get_nyt_marker_missing_returns_500(client, fetcher):
    fetcher.return_value = "<html><body>Puzzle moved</body></html>"

    response = client.get("/api/nyt")

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Failed to fetch NYT data"
    assert "Could not find data start marker" in data["details"]
    assert "timestamp" in data


def test_get_nyt_invalid_payload_returns_500(client, fetcher, game_data):
    game_data["ourSolution"] = None
    fetcher.return_value = make_page(game_data)

    response = client.get("/api/nyt")

    assert response.status_code == 500
    assert "Invalid solution data" in response.json()["details"]


def test_get_nyt_fetch_error_returns_500(client, fetcher):
    fetcher.side_effect = requests.Timeout("read timed out")

    response = client.get("/api/nyt")

    assert response.status_code == 500
    assert response.json()["details"] == "read timed out"


def test_debug_content_reports_marker(client, fetcher, page):
    fetcher.return_value = page

    response = client.get("/api/debug-content")

    assert response.status_code == 200
    data = response.json()
    assert data["found"] is True
    assert data["startIndex"] == page.index("window.gameData = ")
    assert data["contentPreview"].startswith("window.gameData = ")
    assert len(data["contentPreview"]) <= 200
    assert "timestamp" in data


def test_debug_content_marker_missing(client, fetcher):
    fetcher.return_value = "<html></html>"

    response = client.get("/api/debug-content")

    assert response.status_code == 200
    assert response.json()["found"] is False
    assert response.json()["startIndex"] == -1
    assert response.json()["contentPreview"] == "<html></html>"


def test_debug_content_fetch_error_returns_500(client, fetcher):
    fetcher.side_effect = requests.ConnectionError("connection refused")

    response = client.get("/api/debug-content")

    assert response.status_code == 500
    assert response.json() == {"error": "Debug error", "details": "connection refused"}


def test_cors_allows_configured_origin(client, fetcher, page):
    fetcher.return_value = page

    response = client.get("/api/nyt", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_rejects_unknown_origin(client, fetcher, page):
    fetcher.return_value = page

    response = client.get("/api/nyt", headers={"Origin": "https://evil.example"})

    assert "access-control-allow-origin" not in response.headers


def test_default_service_uses_nyt_client(page, game_data):
    with patch("gamedata.nyt.client.requests.get") as mock_get:
        mock_get.return_value.content = page.encode("utf-8")
        mock_get.return_value.raise_for_status.return_value = None

        client = TestClient(create_app())
        response = client.get("/api/nyt")

    assert response.status_code == 200
    assert response.json() == game_data
    _, kwargs = mock_get.call_args
    assert kwargs["headers"]["User-Agent"].startswith("Mozilla/5.0")


def test_get_nyt_deeply_nested_payload_returns_json_500(client, fetcher):
    fetcher.return_value = make_page('{"a":' * 5000 + "1" + "}" * 5000)

    response = client.get("/api/nyt")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    data = response.json()
    assert data["error"] == "Failed to fetch NYT data"
    assert "nesting too deep" in data["details"]


def test_error_timestamp_is_utc_milliseconds(client, fetcher):
    fetcher.return_value = "<html></html>"

    response = client.get("/api/nyt")

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", response.json()["timestamp"])


def test_allowed_origins_from_env(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", " https://a.example , ,https://b.example,")
    assert _allowed_origins() == ["https://a.example", "https://b.example"]


def test_allowed_origins_default_when_unset_or_empty(monkeypatch):
    expected = ["http://localhost:5173", "https://tommylam.github.io"]
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    assert _allowed_origins() == expected
    monkeypatch.setenv("ALLOWED_ORIGINS", "")
    assert _allowed_origins() == expected
    assert DEFAULT_ALLOWED_ORIGINS.split(",") == expected
