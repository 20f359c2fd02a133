from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional

from strikeprint.models.input_model import RecordingInput
from strikeprint.models.window_model import CapturedFrame
from strikeprint.models.metrics_model import MetricsModel
from strikeprint.models.fingerprint_model import FingerprintModel


class WindowState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # MotionWindow after trimming (and mirroring) - internal only
    window: Any = Field(default=None, exclude=True)

    captured_frames: int = 0
    rejected_frames: int = 0
    trim_start: Optional[int] = None
    trim_end: Optional[int] = None
    feet_hidden_frames: int = 0
    mirrored: bool = False


class FeatureState(BaseModel):
    # Resampled feature rows
    rows: List[List[float]] = Field(default_factory=list)
    processed_frames: int = 0


class Context(BaseModel):
    """
    Canonical fingerprint context passed through the pipeline.

    A stage that fails stores its message in `error`; every later stage
    sees it and returns the context untouched.
    """

    # -------------------------
    # Inputs & raw data
    # -------------------------
    input: RecordingInput
    frames: List[CapturedFrame] = Field(default_factory=list, exclude=True)

    # -------------------------
    # Derived stages
    # -------------------------
    window: WindowState = Field(default_factory=WindowState)
    metrics: Optional[MetricsModel] = None
    features: FeatureState = Field(default_factory=FeatureState)

    # -------------------------
    # Output
    # -------------------------
    fingerprint: Optional[FingerprintModel] = None
    error: Optional[str] = None
