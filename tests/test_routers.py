from __future__ import annotations

import json

from fastapi.testclient import TestClient


def _sse_payloads(body: str) -> list[dict]:
    return [json.loads(line[len("data:") :].strip()) for line in body.splitlines() if line.startswith("data:")]


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_generate(client: TestClient) -> None:
    response = client.post("/api/diff/generate", json={"original": "a\nb\nc", "modified": "a\nx\nc"})

    assert response.status_code == 200
    data = response.json()
    assert data["diff"] == "--- a/file\n+++ b/file\n@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n"
    assert data["stats"] == {"additions": 1, "deletions": 1, "hunks": 1, "files": ["b/file"]}


def test_generate_rejects_negative_context(client: TestClient) -> None:
    response = client.post(
        "/api/diff/generate",
        json={"original": "a", "modified": "b", "context_lines": -1},
    )
    assert response.status_code == 400


def test_generate_rejects_large_input(client: TestClient) -> None:
    assert client.put("/api/config", json={"maxLines": 2}).status_code == 200

    response = client.post("/api/diff/generate", json={"original": "a\nb\nc", "modified": "a"})
    assert response.status_code == 413


def test_apply(client: TestClient) -> None:
    diff = client.post(
        "/api/diff/generate",
        json={"original": "one\ntwo\n", "modified": "one\n2\n", "filename": "n.txt"},
    ).json()["diff"]

    response = client.post("/api/diff/apply", json={"original": "one\ntwo\n", "patch": diff})
    assert response.status_code == 200
    assert response.json() == {"patched": "one\n2\n"}


def test_apply_conflict(client: TestClient) -> None:
    diff = "--- a/file\n+++ b/file\n@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n"
    response = client.post("/api/diff/apply", json={"original": "a\nz\nc", "patch": diff})

    assert response.status_code == 422
    assert response.json()["detail"] == "patch conflict at line 2"


def test_parse(client: TestClient) -> None:
    diff = "--- a/file\n+++ b/file\n@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n"
    response = client.post("/api/diff/parse", json={"diff_text": diff})

    assert response.status_code == 200
    (patch,) = response.json()["patches"]
    assert patch["old_file"] == "a/file"
    assert patch["new_file"] == "b/file"
    assert [(c["type"], c["line"]) for c in patch["hunks"][0]["lines"]] == [
        ("equal", "a"),
        ("delete", "b"),
        ("add", "x"),
        ("equal", "c"),
    ]


def test_stats(client: TestClient) -> None:
    diff = "--- a/file\n+++ b/file\n@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n"
    response = client.post("/api/diff/stats", json={"diff_text": diff})

    assert response.json() == {"additions": 1, "deletions": 1, "hunks": 1, "files": ["b/file"]}


def test_stream(client: TestClient) -> None:
    client.put("/api/config", json={"maxLines": 3})
    files = [
        {"original": "a\nb", "modified": "a\nc", "filename": "one.txt"},
        {"original": "1\n2\n3\n4", "modified": "1", "filename": "big.txt"},
    ]
    response = client.post("/api/diff/stream", json={"files": files})

    assert response.status_code == 200
    events = _sse_payloads(response.text)
    assert [e["type"] for e in events] == ["diff", "error", "done"]
    assert events[0]["result"]["file_path"] == "one.txt"
    assert events[0]["result"]["unified_diff"].startswith("--- a/one.txt\n")
    assert events[1]["index"] == 1
    assert "limit is 3" in events[1]["error"]
    assert events[2]["done"] is True


def test_config_round_trip(client: TestClient) -> None:
    assert client.get("/api/config").json() == {"contextLines": 3, "maxLines": 5000, "defaultFilename": "file"}

    response = client.put("/api/config", json={"contextLines": 0, "defaultFilename": " app.py "})
    assert response.status_code == 200
    assert client.get("/api/config").json() == {"contextLines": 0, "maxLines": 5000, "defaultFilename": "app.py"}

    diff = client.post("/api/diff/generate", json={"original": "a\nb", "modified": "a\nc"}).json()["diff"]
    assert diff == "--- a/app.py\n+++ b/app.py\n@@ -2,1 +2,1 @@\n-b\n+c\n"


def test_config_validation(client: TestClient) -> None:
    assert client.put("/api/config", json={"contextLines": -2}).status_code == 400
    assert client.put("/api/config", json={"maxLines": 0}).status_code == 400
    assert client.put("/api/config", json={"defaultFilename": "  "}).status_code == 400


def test_stats_request_model(client: TestClient) -> None:
    response = client.post("/api/diff/stats", json={"diff_text": ""})

    assert response.status_code == 200
    assert response.json() == {"additions": 0, "deletions": 0, "hunks": 0, "files": []}
    assert client.post("/api/diff/stats", json={}).status_code == 422
