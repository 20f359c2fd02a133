from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from pydantic import AliasChoices, BaseModel, Field

from strikeprint.utils.landmarks import is_complete, pose_array


class LandmarkPoint(BaseModel):
    x: float
    y: float
    z: float = 0.0
    # Unknown visibility counts as 0
    visibility: float = Field(
        default=0.0,
        validation_alias=AliasChoices("visibility", "vis", "v"),
    )


class CapturedFrame(BaseModel):
    timestamp_ms: float
    landmarks: Optional[List[LandmarkPoint]] = None


@dataclass(frozen=True, eq=False)
class MotionWindow:
    """
    One captured clip, immutable once built (arrays are read-only).

    timestamps_ms: (F,)
    poses:         (F, 33, 4)  -> x, y, z, visibility
    frame_indices: (F,) position of each kept frame among the frames it was built from
    rejected:      frames dropped for carrying fewer than 33 landmarks
    """

    timestamps_ms: np.ndarray
    poses: np.ndarray
    rejected: int = 0
    frame_indices: Optional[np.ndarray] = None

    def __post_init__(self):
        stamps = np.array(self.timestamps_ms, dtype=float)
        poses = np.array(self.poses, dtype=float)
        if self.frame_indices is None:
            indices = np.arange(len(stamps))
        else:
            indices = np.array(self.frame_indices, dtype=int)

        for arr in (stamps, poses, indices):
            arr.flags.writeable = False

        object.__setattr__(self, "timestamps_ms", stamps)
        object.__setattr__(self, "poses", poses)
        object.__setattr__(self, "frame_indices", indices)

    @classmethod
    def from_frames(cls, frames) -> "MotionWindow":
        stamps, poses, indices, rejected = [], [], [], 0
        for i, f in enumerate(frames):
            lm = f.landmarks if hasattr(f, "landmarks") else f["landmarks"]
            ts = f.timestamp_ms if hasattr(f, "timestamp_ms") else f["timestamp_ms"]
            if not is_complete(lm):
                rejected += 1
                continue
            stamps.append(float(ts))
            poses.append(pose_array(lm, with_visibility=True))
            indices.append(i)

        if not poses:
            return cls(np.zeros(0, float), np.zeros((0, 33, 4), float), rejected, np.zeros(0, int))
        return cls(np.array(stamps, float), np.stack(poses), rejected, np.array(indices, int))

    def __len__(self):
        return len(self.timestamps_ms)

    def slice(self, start: int, end: int) -> "MotionWindow":
        """Inclusive range over the kept frames."""
        return MotionWindow(
            self.timestamps_ms[start:end + 1],
            self.poses[start:end + 1],
            self.rejected,
            self.frame_indices[start:end + 1],
        )

    def with_poses(self, poses) -> "MotionWindow":
        return MotionWindow(self.timestamps_ms, poses, self.rejected, self.frame_indices)
