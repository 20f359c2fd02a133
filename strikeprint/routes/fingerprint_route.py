import os
import tempfile
from typing import List, Literal, Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from strikeprint.models.fingerprint_model import FingerprintModel
from strikeprint.models.input_model import RecordingInput
from strikeprint.models.window_model import CapturedFrame
from strikeprint.pipeline.runner import build_fingerprint
from strikeprint.pipeline.submit_stage import HttpFingerprintSink, run as submit_stage
from strikeprint.utils import settings

router = APIRouter()


class FingerprintRequest(BaseModel):
    input: RecordingInput
    frames: List[CapturedFrame] = Field(default_factory=list)


def _respond(ctx):
    if ctx.error or ctx.fingerprint is None:
        raise HTTPException(status_code=422, detail=ctx.error or "Fingerprint not produced")
    return ctx.fingerprint.model_dump()


@router.post("/fingerprint")
def create_fingerprint(req: FingerprintRequest):
    ctx = build_fingerprint(req.input, req.frames)
    return _respond(ctx)


@router.post("/fingerprint/video")
async def create_fingerprint_from_video(
    file: UploadFile = File(...),
    name: str = "",
    performer: str = "",
    stance: Literal["orthodox", "southpaw"] = "orthodox",
    height_cm: Optional[int] = None,
    trim_start: Optional[int] = None,
    trim_end: Optional[int] = None,
):
    from strikeprint.pipeline.pose_stage import MediaPipeVideoSource, capture

    suffix = os.path.splitext(file.filename or "")[1]
    fd, tmp_path = tempfile.mkstemp(prefix="strikeprint_", suffix=suffix)

    try:
        with os.fdopen(fd, "wb") as out:
            out.write(await file.read())

        try:
            frames = capture(MediaPipeVideoSource(tmp_path))
        except ImportError as e:
            raise HTTPException(
                status_code=503,
                detail=f"Video input needs the 'video' extra (mediapipe, opencv-python): {e}",
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        recording = RecordingInput(
            name=name,
            performer=performer,
            stance=stance,
            height_cm=height_cm,
            trim_start=trim_start,
            trim_end=trim_end,
        )
        ctx = build_fingerprint(recording, frames)
        return _respond(ctx)

    finally:
        os.remove(tmp_path)


@router.post("/fingerprint/submit")
def submit_fingerprint(doc: FingerprintModel):
    if not settings.SINK_URL:
        raise HTTPException(status_code=503, detail="No storage endpoint configured")

    sink = HttpFingerprintSink(settings.SINK_URL, timeout=settings.SINK_TIMEOUT)
    result = submit_stage(doc, sink)

    if not result.success:
        return JSONResponse(status_code=502, content=result.model_dump())
    return result.model_dump()
