# strikeprint/pipeline/submit_stage.py
"""
Boundary to the persistence collaborator.

The core only hands over the finished document; where it ends up is the
collaborator's business. A failed submit leaves the document untouched and
can simply be retried.
"""

from typing import Optional, Protocol

import requests

from strikeprint.models.submit_model import SubmitResult
from strikeprint.utils.logger import error, log


class FingerprintSink(Protocol):
    def submit(self, document: dict) -> SubmitResult:
        ...


class HttpFingerprintSink:
    """
    POST the document as JSON. The collaborator answers
    {"success": true, "filename": ...} or {"success": false, "error": ...}.
    """

    def __init__(self, url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def submit(self, document: dict) -> SubmitResult:
        try:
            r = self.session.post(self.url, json=document, timeout=self.timeout)
        except requests.RequestException as e:
            error(f"[ERROR] SubmitStage: transport failure: {e}")
            return SubmitResult(success=False, error=str(e))

        try:
            body = r.json()
        except ValueError:
            body = {}

        if not r.ok:
            reason = body.get("error") if isinstance(body, dict) else None
            reason = reason or f"HTTP {r.status_code}"
            error(f"[ERROR] SubmitStage: {reason}")
            return SubmitResult(success=False, error=reason)

        if not isinstance(body, dict) or not body.get("success"):
            reason = (body.get("error") if isinstance(body, dict) else None) or "Rejected by storage"
            error(f"[ERROR] SubmitStage: {reason}")
            return SubmitResult(success=False, error=str(reason))

        storage_id = body.get("filename") or body.get("id")
        log(f"[INFO] SubmitStage: stored as {storage_id}")
        return SubmitResult(
            success=True,
            storage_id=str(storage_id) if storage_id is not None else None,
        )


def run(document, sink: FingerprintSink) -> SubmitResult:
    if hasattr(document, "model_dump"):
        document = document.model_dump()
    return sink.submit(document)
