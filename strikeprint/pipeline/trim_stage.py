# strikeprint/pipeline/trim_stage.py

import numpy as np

from strikeprint.models.context import Context
from strikeprint.models.window_model import MotionWindow
from strikeprint.utils.landmarks import LEFT_FOOT, RIGHT_FOOT
from strikeprint.utils.logger import log, warn, error


# -----------------------------
# Tunable (but NOT hard-coded)
# -----------------------------
MIN_TRIMMED_FRAMES = 5
TRIM_MIN_GAP = 5
FOOT_VIS_MIN = 0.5


def clamp_range(n, start=None, end=None):
    """
    Clamp an inclusive [start, end] selection to n frames.
    A start closer than TRIM_MIN_GAP to the end is pulled back.
    """
    end = n - 1 if end is None else max(0, min(int(end), n - 1))
    start = 0 if start is None else max(0, min(int(start), n - 1))

    if start > end - TRIM_MIN_GAP:
        start = max(0, end - TRIM_MIN_GAP)

    return start, end


def feet_hidden(poses, vis_min=FOOT_VIS_MIN):
    """Per frame: True when either foot landmark is below vis_min."""
    poses = np.asarray(poses, dtype=float)
    if poses.ndim != 3 or poses.shape[-1] < 4:
        return np.zeros(len(poses), dtype=bool)
    return (poses[:, LEFT_FOOT, 3] < vis_min) | (poses[:, RIGHT_FOOT, 3] < vis_min)


def run(ctx: Context) -> Context:
    if ctx.error:
        return ctx

    try:
        log("[INFO] TrimStage: Starting")

        captured = len(ctx.frames)
        ctx.window.captured_frames = captured

        if captured == 0:
            ctx.error = "No usable frames were captured"
            error(f"[ERROR] TrimStage: {ctx.error}")
            return ctx

        # Trim indices address the captured frames, incomplete ones included
        start, end = clamp_range(captured, ctx.input.trim_start, ctx.input.trim_end)
        trimmed = MotionWindow.from_frames(ctx.frames[start:end + 1])
        ctx.window.rejected_frames = trimmed.rejected

        if trimmed.rejected:
            warn(f"[WARN] TrimStage: dropped {trimmed.rejected} incomplete frames in {start}..{end}")

        if len(trimmed) < MIN_TRIMMED_FRAMES:
            ctx.error = "Selected range is too short"
            error(f"[ERROR] TrimStage: {ctx.error} ({len(trimmed)} frames)")
            return ctx

        ctx.window.window = trimmed
        ctx.window.trim_start = start
        ctx.window.trim_end = end
        ctx.window.feet_hidden_frames = int(np.sum(feet_hidden(trimmed.poses)))

        log(f"[INFO] TrimStage: Completed ({start}..{end}, {len(trimmed)} frames)")
        return ctx

    except Exception as e:
        ctx.error = str(e)
        error(f"[ERROR] TrimStage: {e}")
        return ctx
