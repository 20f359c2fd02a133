# strikeprint/pipeline/engine.py

from typing import List, Optional

from strikeprint.pipeline.centroid import centroid
from strikeprint.pipeline.features import extract
from strikeprint.pipeline.normalize import normalize
from strikeprint.pipeline.one_euro import AdaptiveFilterBank
from strikeprint.utils.landmarks import is_complete, pose_array


class NormalizationEngine:
    """
    Per-session frame processor: smooth -> center of gravity -> normalize
    -> 24-value feature vector.

    The engine owns the session's filter bank, so create one engine per
    recording and feed it frames in capture order.
    """

    def __init__(self, bank: Optional[AdaptiveFilterBank] = None):
        self.bank = bank if bank is not None else AdaptiveFilterBank()

    def process(self, landmarks, timestamp: float) -> Optional[List[float]]:
        """
        landmarks: 33+ points (dicts, models or an array)
        timestamp: capture time in seconds

        Returns None for missing or incomplete frames; the filter state is
        left untouched in that case.
        """
        if not is_complete(landmarks):
            return None

        smoothed = self.bank.smooth(pose_array(landmarks), timestamp)
        cog = centroid(smoothed)
        pose, cog = normalize(smoothed, cog)
        return extract(pose, cog)
