import pytest
from fastapi.testclient import TestClient

from conftest import jab_frames
from strikeprint.main import app
from strikeprint.models.submit_model import SubmitResult
from strikeprint.pipeline import pose_stage
from strikeprint.routes import fingerprint_route
from strikeprint.utils import settings

client = TestClient(app)


def _payload(**input_kw):
    recording = {"name": "Rear kick", "performer": "Kai", "stance": "orthodox", "height_cm": 175}
    recording.update(input_kw)
    return {
        "input": recording,
        "frames": [f.model_dump() for f in jab_frames()],
    }


def test_health():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_create_fingerprint():
    r = client.post("/fingerprint", json=_payload())
    assert r.status_code == 200

    doc = r.json()
    assert doc["frames"] == 100
    assert len(doc["fingerprint"]) == 100
    assert doc["metrics"]["active_part"] == "right_hand"


def test_vis_alias_accepted():
    payload = _payload()
    for frame in payload["frames"]:
        for p in frame["landmarks"]:
            p["vis"] = p.pop("visibility")
    r = client.post("/fingerprint", json=payload)
    assert r.status_code == 200


def test_validation_failure_is_422():
    r = client.post("/fingerprint", json=_payload(name=""))
    assert r.status_code == 422
    assert r.json()["detail"] == "Technique name is required"


def _document():
    return client.post("/fingerprint", json=_payload()).json()


def test_submit_without_sink(monkeypatch):
    monkeypatch.setattr(settings, "SINK_URL", None)
    r = client.post("/fingerprint/submit", json=_document())
    assert r.status_code == 503


class _FakeSink:
    result = SubmitResult(success=True, storage_id="rear_kick.json")
    seen = []

    def __init__(self, url, timeout=10.0):
        self.url = url

    def submit(self, document):
        self.seen.append(document)
        return self.result


@pytest.mark.parametrize(
    "result,status",
    [
        (SubmitResult(success=True, storage_id="rear_kick.json"), 200),
        (SubmitResult(success=False, error="disk full"), 502),
    ],
)
def test_submit_forwards_document(monkeypatch, result, status):
    monkeypatch.setattr(settings, "SINK_URL", "http://storage.local/api/save-fingerprint")
    monkeypatch.setattr(_FakeSink, "result", result)
    monkeypatch.setattr(fingerprint_route, "HttpFingerprintSink", _FakeSink)

    doc = _document()
    r = client.post("/fingerprint/submit", json=doc)

    assert r.status_code == status
    assert r.json()["success"] is result.success
    assert _FakeSink.seen[-1]["name"] == doc["name"]


def test_video_without_extra_is_503(monkeypatch):
    def missing_extra(path):
        raise ImportError("No module named 'mediapipe'")

    monkeypatch.setattr(pose_stage, "MediaPipeVideoSource", missing_extra)
    r = client.post(
        "/fingerprint/video",
        params={"name": "Jab"},
        files={"file": ("clip.mp4", b"\x00\x01", "video/mp4")},
    )
    assert r.status_code == 503
    assert "video" in r.json()["detail"]


def test_unreadable_video_is_400(monkeypatch):
    def unreadable(path):
        raise ValueError(f"Unable to open file: {path}")

    monkeypatch.setattr(pose_stage, "MediaPipeVideoSource", unreadable)
    r = client.post(
        "/fingerprint/video",
        params={"name": "Jab"},
        files={"file": ("clip.mp4", b"\x00\x01", "video/mp4")},
    )
    assert r.status_code == 400
