from pydantic import BaseModel
from typing import Literal

ActivePart = Literal["left_hand", "right_hand", "left_foot", "right_foot"]


class MetricsModel(BaseModel):
    duration_sec: float = 0.0
    active_part: ActivePart = "right_hand"
    max_speed_outbound: float = 0.0   # m/s
    max_speed_return: float = 0.0     # m/s
    # Index into the captured (trimmed) window, not the resampled grid
    apex_frame: int = 0
