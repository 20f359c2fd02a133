import requests

from strikeprint.models.submit_model import SubmitResult
from strikeprint.pipeline.submit_stage import HttpFingerprintSink, run


class _Response:
    def __init__(self, status, body):
        self.status_code = status
        self.ok = 200 <= status < 300
        self._body = body

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class _Session:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append((url, json, timeout))
        if self.exc:
            raise self.exc
        return self.response


DOC = {"name": "Jab", "frames": 100}


def test_success_with_filename():
    session = _Session(_Response(200, {"success": True, "filename": "jab_1.json"}))
    sink = HttpFingerprintSink("http://pc/api/save-fingerprint", timeout=3, session=session)

    result = sink.submit(DOC)
    assert result == SubmitResult(success=True, storage_id="jab_1.json")
    assert session.calls == [("http://pc/api/save-fingerprint", DOC, 3)]


def test_rejected_with_reason():
    session = _Session(_Response(200, {"success": False, "error": "duplicate"}))
    result = HttpFingerprintSink("http://pc", session=session).submit(DOC)
    assert not result.success
    assert result.error == "duplicate"


def test_http_error_status():
    session = _Session(_Response(500, ValueError("not json")))
    result = HttpFingerprintSink("http://pc", session=session).submit(DOC)
    assert not result.success
    assert result.error == "HTTP 500"


def test_transport_failure_is_reported_and_retryable():
    session = _Session(exc=requests.ConnectionError("refused"))
    sink = HttpFingerprintSink("http://pc", session=session)

    first = sink.submit(DOC)
    assert not first.success
    assert "refused" in first.error

    session.exc = None
    session.response = _Response(200, {"success": True, "id": 42})
    second = sink.submit(DOC)
    assert second.success and second.storage_id == "42"
    assert DOC == {"name": "Jab", "frames": 100}


def test_run_dumps_models():
    seen = {}

    class Sink:
        def submit(self, document):
            seen.update(document)
            return SubmitResult(success=True)

    result = run(SubmitResult(success=True, storage_id="x"), Sink())
    assert result.success
    assert seen == {"success": True, "storage_id": "x", "error": None}
