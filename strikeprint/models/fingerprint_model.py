from pydantic import BaseModel, Field
from typing import List, Literal

from strikeprint.models.metrics_model import MetricsModel

FINGERPRINT_VERSION = "3.1"


class FingerprintModel(BaseModel):
    """
    Stored representation of one technique. Built once per clip and never
    mutated afterwards.
    """

    name: str
    performer: str
    stance_original: Literal["orthodox", "southpaw"]
    height_cm: int
    created_at: str
    version: str = FINGERPRINT_VERSION
    metrics: MetricsModel
    frames: int
    fingerprint: List[List[float]] = Field(default_factory=list)
