from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from backend.app.core.config import BackendSettings, get_environment
from backend.app.dev import create_dev_app


@pytest.fixture
def site(tmp_path):
    (tmp_path / "index.html").write_text("<h1>game</h1>", encoding="utf-8")
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "config.js").write_text("export default {};", encoding="utf-8")
    (tmp_path / ".env").write_text("DEEPSEEK_API_KEY=sk-secret", encoding="utf-8")
    return tmp_path


def _client(site, env) -> TestClient:
    settings = BackendSettings(
        static_root=str(site), logs_dir=str(site / ".logs")
    )
    app = create_dev_app(settings)
    app.dependency_overrides[get_environment] = lambda: env
    return TestClient(app)


def test_config_returns_literal_key(site):
    response = _client(site, {"DEEPSEEK_API_KEY": "sk-local-123"}).get("/api/config")

    assert response.status_code == 200
    body = response.json()
    assert body["apiKey"] == "sk-local-123"
    assert body["baseUrl"] == "https://api.deepseek.com/v1/chat/completions"
    assert body["requestConfig"]["maxTokens"] == 1000
    assert response.headers["access-control-allow-origin"] == "*"


def test_config_without_key_is_server_error(site):
    response = _client(site, {"API_KEY": "ignored-here"}).get("/api/config")

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"error", "message"}
    assert "DEEPSEEK_API_KEY" in body["message"]


@pytest.mark.parametrize(
    ("env", "expected"),
    [({}, False), ({"DEEPSEEK_API_KEY": "YOUR_API_KEY_HERE"}, True)],
)
def test_health_reports_key_presence(site, env, expected):
    response = _client(site, env).get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["environment"] == "development"
    assert body["hasApiKey"] is expected
    assert body["timestamp"].endswith("Z")
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_root_serves_entry_document(site):
    response = _client(site, {}).get("/")

    assert response.status_code == 200
    assert "<h1>game</h1>" in response.text
    assert response.headers["access-control-allow-origin"] == "*"


def test_root_missing_entry_document(tmp_path):
    response = _client(tmp_path, {}).get("/")

    assert response.status_code == 404


def test_static_files_and_missing_files(site):
    client = _client(site, {})

    assert client.get("/js/config.js").text == "export default {};"
    assert client.get("/js/missing.js").status_code == 404


def test_dot_files_are_not_served(site):
    response = _client(site, {}).get("/.env")

    assert response.status_code == 404
    assert "sk-secret" not in response.text


def test_save_logs_requires_data(site):
    response = _client(site, {}).post("/api/save-logs", json={})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_save_logs_writes_files(site):
    response = _client(site, {}).post(
        "/api/save-logs",
        json={"conversationLog": [{"speaker": "player", "text": "hi"}], "systemLog": []},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    (result,) = body["results"]
    assert result["type"] == "conversation"
    assert result["success"] is True
    assert "error" not in result
    assert (site / ".logs" / result["filename"]).exists()


def test_save_logs_accepts_empty_lists(site):
    response = _client(site, {}).post(
        "/api/save-logs", json={"conversationLog": [], "systemLog": []}
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logs saved", "results": []}


def test_preflight_for_cross_origin_post(site):
    response = _client(site, {}).options(
        "/api/save-logs",
        headers={
            "Origin": "http://localhost:5500",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]
    assert "Content-Type" in response.headers["access-control-allow-headers"]
