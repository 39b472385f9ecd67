"""
test_api_previews.py - preview session endpoints

Endpoints:
- POST /api/previews
- GET /api/previews/{session_id}
- PUT /api/previews/{session_id}/fragments/{kind}
- POST /api/previews/{session_id}/reset
- GET /api/previews/{session_id}/document
- DELETE /api/previews/{session_id}
"""

import pytest
from fastapi.testclient import TestClient

from snippet_studio.modules.editing import PreviewSessionRegistry


@pytest.fixture
def session_id(client: TestClient) -> str:
    response = client.post("/api/previews", json={"template_id": 1})
    assert response.status_code == 201
    return response.json()["session_id"]


def test_open_seeds_canonical_fragments(client: TestClient):
    response = client.post("/api/previews", json={"template_id": 1})

    assert response.status_code == 201
    body = response.json()
    assert body["template_id"] == 1
    assert body["fragments"] == {"html": "<div>A</div>", "css": ".a{color:red}", "js": ""}


def test_open_unknown_template_creates_nothing(client: TestClient, app):
    response = client.post("/api/previews", json={"template_id": 99})

    assert response.status_code == 404
    assert len(app.state.preview_sessions) == 0


def test_open_during_store_outage(client: TestClient, store):
    store.unavailable = True

    assert client.post("/api/previews", json={"template_id": 1}).status_code == 503


def test_update_one_fragment(client: TestClient, session_id: str):
    response = client.put(f"/api/previews/{session_id}/fragments/css", json={"text": ".b{}"})

    assert response.status_code == 200
    assert response.json()["fragments"] == {"html": "<div>A</div>", "css": ".b{}", "js": ""}


def test_empty_text_accepted(client: TestClient, session_id: str):
    response = client.put(f"/api/previews/{session_id}/fragments/html", json={"text": ""})

    assert response.status_code == 200
    assert response.json()["fragments"]["html"] == ""


def test_unknown_fragment_kind(client: TestClient, session_id: str):
    response = client.put(f"/api/previews/{session_id}/fragments/ts", json={"text": "x"})

    assert response.status_code == 422


def test_document_renders_drafts_in_sandbox(client: TestClient, session_id: str):
    client.put(f"/api/previews/{session_id}/fragments/js", json={"text": "console.log('draft')"})

    response = client.get(f"/api/previews/{session_id}/document")

    assert response.status_code == 200
    assert response.headers["content-security-policy"] == "sandbox allow-scripts"
    assert "console.log('draft')" in response.text
    assert "<div>A</div>" in response.text


def test_reset_restores_canonical(client: TestClient, session_id: str):
    client.put(f"/api/previews/{session_id}/fragments/html", json={"text": "<p>x</p>"})
    client.put(f"/api/previews/{session_id}/fragments/js", json={"text": "y()"})

    response = client.post(f"/api/previews/{session_id}/reset")

    assert response.status_code == 200
    assert response.json()["fragments"] == {"html": "<div>A</div>", "css": ".a{color:red}", "js": ""}


def test_reset_when_template_removed(client: TestClient, session_id: str, store):
    del store.templates[1]

    assert client.post(f"/api/previews/{session_id}/reset").status_code == 404


def test_sessions_are_isolated(client: TestClient):
    first = client.post("/api/previews", json={"template_id": 1}).json()["session_id"]
    second = client.post("/api/previews", json={"template_id": 1}).json()["session_id"]

    client.put(f"/api/previews/{first}/fragments/html", json={"text": "<p>first</p>"})

    assert client.get(f"/api/previews/{second}").json()["fragments"]["html"] == "<div>A</div>"
    assert client.get("/api/templates/1").json()["code_html"] == "<div>A</div>"


def test_close_session(client: TestClient, session_id: str):
    assert client.delete(f"/api/previews/{session_id}").status_code == 204
    assert client.get(f"/api/previews/{session_id}").status_code == 404
    assert client.delete(f"/api/previews/{session_id}").status_code == 404


def test_unknown_session(client: TestClient):
    assert client.get("/api/previews/nope").status_code == 404
    assert client.get("/api/previews/nope/document").status_code == 404
    assert client.post("/api/previews/nope/reset").status_code == 404
    assert client.put("/api/previews/nope/fragments/html", json={"text": ""}).status_code == 404


def test_session_being_edited_outlives_newer_sessions(client: TestClient, app):
    app.state.preview_sessions = PreviewSessionRegistry(max_sessions=3)
    edited = client.post("/api/previews", json={"template_id": 1}).json()["session_id"]
    client.put(f"/api/previews/{edited}/fragments/html", json={"text": "<p>mine</p>"})

    for _ in range(2):
        client.post("/api/previews", json={"template_id": 2})
    client.get(f"/api/previews/{edited}")
    client.post("/api/previews", json={"template_id": 2})

    response = client.get(f"/api/previews/{edited}")
    assert response.status_code == 200
    assert response.json()["fragments"]["html"] == "<p>mine</p>"
