from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app import create_app


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.delenv("PATTERNKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    with TestClient(create_app()) as c:
        yield c


def test_health(client: TestClient) -> None:
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert "merge" in body["sort_strategies"]
    assert "csv" in body["parser_types"]


def test_sort_default_strategy(client: TestClient) -> None:
    resp = client.post("/api/v1/sort", json={"values": [3, 1, 2]})
    assert resp.status_code == 200
    assert resp.json() == {"strategy": "builtin", "values": [1, 2, 3]}


def test_sort_named_strategy(client: TestClient) -> None:
    resp = client.post("/api/v1/sort", json={"values": ["b", "c", "a"], "strategy": "Quick"})
    assert resp.status_code == 200
    assert resp.json() == {"strategy": "quick", "values": ["a", "b", "c"]}


def test_sort_unknown_strategy_is_400(client: TestClient) -> None:
    resp = client.post("/api/v1/sort", json={"values": [1], "strategy": "bogo"})
    assert resp.status_code == 400
    assert resp.json()["detail"]["type"] == "bogo"


def test_sort_incomparable_values_is_422(client: TestClient) -> None:
    resp = client.post("/api/v1/sort", json={"values": [1, "a"]})
    assert resp.status_code == 422


def test_parse_json(client: TestClient) -> None:
    resp = client.post("/api/v1/parse", json={"content": "[1, 2, 3]"})
    assert resp.status_code == 200
    assert resp.json() == {
        "format": "json",
        "count": 3,
        "records": [1, 2, 3],
        "description": "Parsing JSON data",
    }


def test_parse_csv_without_header(client: TestClient) -> None:
    resp = client.post(
        "/api/v1/parse",
        json={"content": "a|b\nc|d\n", "type": "csv", "delimiter": "|", "has_header": False},
    )
    assert resp.status_code == 200
    assert resp.json()["records"] == [["a", "b"], ["c", "d"]]


def test_parse_unknown_type_is_400(client: TestClient) -> None:
    resp = client.post("/api/v1/parse", json={"content": "<a/>", "type": "xml"})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["type"] == "xml"
    assert "json" in detail["supported"]


def test_parse_malformed_is_422(client: TestClient) -> None:
    resp = client.post("/api/v1/parse", json={"content": "{", "type": "json"})
    assert resp.status_code == 422
    assert resp.json()["detail"]["format"] == "json"


@pytest.mark.parametrize("text", ["a: [1, 2\n", "- not\n- a mapping\n"])
def test_create_app_survives_bad_config(monkeypatch, tmp_path, text: str) -> None:
    monkeypatch.delenv("PATTERNKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "patternkit.yaml").write_text(text, encoding="utf-8")

    fastapi_app = create_app()

    paths = {route.path for route in fastapi_app.routes}
    assert "/api/v1/health" in paths


def test_create_app_survives_unreadable_config(monkeypatch, tmp_path) -> None:
    # A directory in place of the file makes open() fail with an OSError.
    (tmp_path / "patternkit.yaml").mkdir()
    monkeypatch.delenv("PATTERNKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

    fastapi_app = create_app()

    assert any(route.path == "/api/v1/sort" for route in fastapi_app.routes)
