import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path, monkeypatch):
    from donutviz.server import pie_routes
    from donutviz.server.app import app
    monkeypatch.setattr(pie_routes, "RENDER_LOG", str(tmp_path / "runs.csv"))
    return TestClient(app)


def test_health(client):
    assert client.get("/").json()["ok"] is True


def test_render_final_frame(client, tmp_path):
    r = client.post("/pie/render", json={"values": [1, 1, 2, 4], "labels": ["a", "b"], "donut": 0.3})
    assert r.status_code == 200
    j = r.json()
    assert j["ok"] is True
    assert len(j["segments"]) == 4
    assert j["segments"][3]["ratio"] == 0.5
    assert 'id="graphMask"' in j["svg"]
    assert 'class="label"' in j["html"]
    rows = (tmp_path / "runs.csv").read_text().splitlines()
    assert rows[0].startswith("timestamp,n_slices")
    assert rows[1].endswith("rendered")


def test_render_rejects_zero_sum_and_bad_config(client):
    r = client.post("/pie/render", json={"values": [0, 0]})
    assert r.status_code == 400 and r.json()["ok"] is False
    r = client.post("/pie/render", json={"values": [1], "colors": []})
    assert r.status_code == 400
    assert any("colors" in e for e in r.json()["errors"])


def test_frames_progress(client):
    r = client.post("/pie/frames?fps=50", json={"values": "2;1;1", "duration_ms": 100})
    j = r.json()
    progress = [f["progress"] for f in j["frames"]]
    assert progress == pytest.approx([0.2, 0.4, 0.6, 0.8, 1.0])
    assert j["times_ms"] == [20.0, 40.0, 60.0, 80.0, 100.0]


def test_png(client):
    r = client.post("/pie/png", json={"values": [1, 2, 3]})
    assert r.status_code == 200
    assert r.headers["content-type"] == "image/png"
    assert r.content[:4] == b"\x89PNG"


def test_hover_reports_label_and_event(client):
    spec = {"values": [1, 1, 2, 4], "labels": ["a", "b", "c", "d"]}
    j = client.post("/pie/hover", json={"spec": spec, "index": 2}).json()
    assert j["active_labels"] == [2] and j["events"] == [2] and j["active_index"] == 2
    j = client.post("/pie/hover", json={"spec": spec, "index": 2, "leave": True}).json()
    assert j["active_labels"] == [] and j["events"] == [2] and j["active_index"] is None
    r = client.post("/pie/hover", json={"spec": spec, "index": 9})
    assert r.status_code == 400


def test_hover_rejects_boolean_index(client):
    spec = {"values": [1, 1], "labels": ["a", "b"]}
    for flag in (True, False):
        r = client.post("/pie/hover", json={"spec": spec, "index": flag})
        assert r.status_code == 400
        assert r.json()["ok"] is False
