# strikeprint/pipeline/pose_stage.py
"""
Landmark sources: where captured frames come from.

The fingerprint pipeline only needs something that yields
(timestamp_ms, 33 landmarks) pairs. MediaPipeVideoSource is one such
producer over a video file; mediapipe and OpenCV are imported lazily so the
rest of the package works without them (`pip install strikeprint[video]`).
"""

from typing import Iterator, List, Optional, Protocol, Tuple

from strikeprint.models.window_model import CapturedFrame, LandmarkPoint
from strikeprint.pipeline.trim_stage import FOOT_VIS_MIN
from strikeprint.utils.landmarks import LEFT_FOOT, RIGHT_FOOT
from strikeprint.utils.logger import log, warn


class LandmarkSource(Protocol):
    def __iter__(self) -> Iterator[Tuple[float, List[LandmarkPoint]]]:
        ...

    def close(self) -> None:
        ...


def landmarks_from_result(result, world: bool = True) -> Optional[List[LandmarkPoint]]:
    """
    Convert a MediaPipe Pose result to landmark points.

    World landmarks (metres, hip-centred) are preferred; image landmarks are
    used when the model returned no world estimate.
    """
    source = getattr(result, "pose_world_landmarks", None) if world else None
    if not source:
        source = getattr(result, "pose_landmarks", None)
    if not source:
        return None

    return [
        LandmarkPoint(
            x=float(p.x),
            y=float(p.y),
            z=float(p.z),
            visibility=float(getattr(p, "visibility", 0.0) or 0.0),
        )
        for p in source.landmark
    ]


def feet_visible(landmarks, vis_min=FOOT_VIS_MIN) -> bool:
    if not landmarks or len(landmarks) <= RIGHT_FOOT:
        return False
    return (
        landmarks[LEFT_FOOT].visibility >= vis_min
        and landmarks[RIGHT_FOOT].visibility >= vis_min
    )


class MediaPipeVideoSource:
    """
    Decode a video with OpenCV and run MediaPipe Pose frame by frame.

    Frames without a detection are skipped; timestamps come from the frame
    index and the container fps.
    """

    def __init__(self, file_path, model_complexity=1, estimator=None):
        import cv2

        if estimator is None:
            import mediapipe as mp

            estimator = mp.solutions.pose.Pose(
                static_image_mode=False,
                model_complexity=model_complexity,
                smooth_landmarks=True,
                min_detection_confidence=0.5,
                min_tracking_confidence=0.5,
            )

        self._cv2 = cv2
        self.file_path = file_path
        self.pose = estimator
        self.cap = cv2.VideoCapture(file_path)
        if not self.cap.isOpened():
            self.close()
            raise ValueError(f"Unable to open file: {file_path}")

        fps = self.cap.get(cv2.CAP_PROP_FPS)
        self.fps = fps if fps and fps > 0 else 30.0

    def __iter__(self):
        idx = 0
        while True:
            ret, frame = self.cap.read()
            if not ret:
                break

            rgb = self._cv2.cvtColor(frame, self._cv2.COLOR_BGR2RGB)
            landmarks = landmarks_from_result(self.pose.process(rgb))
            if landmarks is not None:
                yield idx * 1000.0 / self.fps, landmarks
            idx += 1

    def close(self):
        self.cap.release()
        self.pose.close()


def capture(source: LandmarkSource, max_frames: Optional[int] = None) -> List[CapturedFrame]:
    """Drain a landmark source into a list of captured frames."""
    frames = []
    hidden = 0
    try:
        for ts, landmarks in source:
            if not feet_visible(landmarks):
                hidden += 1
            frames.append(CapturedFrame(timestamp_ms=ts, landmarks=landmarks))
            if max_frames is not None and len(frames) >= max_frames:
                break
    finally:
        source.close()

    if hidden:
        warn(f"[WARN] PoseStage: feet not visible in {hidden}/{len(frames)} frames")
    log(f"[INFO] PoseStage: captured {len(frames)} frames")
    return frames
