"""Integration tests for the FastAPI service."""

from __future__ import annotations

import json
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_config, get_loader, get_theme_store
from core.config import load_config
from core.data import LOAD_ERROR_MESSAGE, load, parse_payload
from core.state import LoadError
from core.theme import THEME_KEY, MemoryThemeStore

pytestmark = pytest.mark.integration


@pytest.fixture
def data_file(tmp_path, sample_payload):
    path = tmp_path / "dashboard_data.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path


@pytest.fixture
def loaded_from():
    return []


@pytest.fixture
def client(data_file, memory_store, loaded_from):
    """Return a TestClient with config, loader and theme store overridden."""

    cfg = replace(load_config({}), data_file=data_file)

    def _loader(source):
        loaded_from.append(source)
        return parse_payload(json.loads(data_file.read_text(encoding="utf-8")))

    app.dependency_overrides[get_config] = lambda: cfg
    app.dependency_overrides[get_loader] = lambda: _loader
    app.dependency_overrides[get_theme_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_serves_static_dashboard_data(client, sample_payload) -> None:
    response = client.get("/dashboard_data.json")

    assert response.status_code == 200
    assert response.json() == sample_payload


def test_missing_data_file_is_404(client, data_file) -> None:
    data_file.unlink()

    response = client.get("/dashboard_data.json")

    assert response.status_code == 404
    assert response.json()["type"] == "FileNotFoundError"


def test_dashboard_returns_ready_view_model(client, loaded_from, data_file) -> None:
    response = client.get("/dashboard")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["series"] == [{"time": "Morning", "accidents": 10}, {"time": "Evening", "accidents": 25}]
    assert body["numeric_stats"][0]["text"] == "speed: mean=45.20, sd=5.10"
    assert loaded_from == [data_file.resolve().as_uri()]


def test_dashboard_reads_local_data_file_by_default(client) -> None:
    """With no base URL configured the real loader reads the data file without a running server."""

    app.dependency_overrides[get_loader] = lambda: load

    body = client.get("/dashboard").json()

    assert body["status"] == "ready"
    assert len(body["series"]) == 2


def test_dashboard_reports_load_error_state(client) -> None:
    app.dependency_overrides[get_loader] = lambda: (lambda source: LoadError(message=LOAD_ERROR_MESSAGE))

    body = client.get("/dashboard").json()

    assert body == {
        "status": "error",
        "error": LOAD_ERROR_MESSAGE,
        "theme": "light",
    }


def test_dashboard_unexpected_failure_is_500(client) -> None:
    def _boom(source):
        raise RuntimeError("boom")

    app.dependency_overrides[get_loader] = lambda: _boom

    response = client.get("/dashboard")

    assert response.status_code == 500
    assert response.json() == {"error": "boom", "type": "RuntimeError"}


def test_theme_toggle_persists(client, memory_store) -> None:
    assert client.get("/theme").json() == {"theme": "light"}

    assert client.post("/theme/toggle").json() == {"theme": "dark"}
    assert memory_store.get(THEME_KEY) == "dark"
    assert client.get("/dashboard").json()["theme"] == "dark"

    assert client.post("/theme/toggle").json() == {"theme": "light"}
    assert memory_store.get(THEME_KEY) == "light"


def test_put_theme_validates_value(client, memory_store) -> None:
    assert client.put("/theme", json={"theme": "dark"}).json() == {"theme": "dark"}
    assert memory_store.get(THEME_KEY) == "dark"

    assert client.put("/theme", json={"theme": "sepia"}).status_code == 422
    assert memory_store.get(THEME_KEY) == "dark"


def test_theme_store_failure_defaults_to_light(client) -> None:
    class BrokenStore(MemoryThemeStore):
        def get(self, key):
            raise OSError("unavailable")

        def set(self, key, value):
            raise OSError("unavailable")

    app.dependency_overrides[get_theme_store] = lambda: BrokenStore()

    assert client.get("/theme").json() == {"theme": "light"}
    assert client.post("/theme/toggle").json() == {"theme": "dark"}
