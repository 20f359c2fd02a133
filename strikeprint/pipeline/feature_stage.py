# strikeprint/pipeline/feature_stage.py

from strikeprint.models.context import Context
from strikeprint.pipeline.engine import NormalizationEngine
from strikeprint.pipeline.resample import resample
from strikeprint.utils.logger import error, log

FINGERPRINT_FRAMES = 100


def run(ctx: Context) -> Context:
    """
    Feed every frame of the (mirrored) window through a fresh
    NormalizationEngine, then resample to FINGERPRINT_FRAMES rows.

    The filter sees real capture time in seconds, relative to the first
    frame of the window.
    """
    if ctx.error:
        return ctx

    try:
        log("[INFO] FeatureStage: Starting")

        window = ctx.window.window
        if window is None:
            ctx.error = "Missing motion window"
            return ctx

        engine = NormalizationEngine()
        t0 = float(window.timestamps_ms[0])

        vectors = []
        for ts, pose in zip(window.timestamps_ms, window.poses):
            features = engine.process(pose, (float(ts) - t0) / 1000.0)
            if features is not None:
                vectors.append(features)

        ctx.features.processed_frames = len(vectors)
        ctx.features.rows = resample(vectors, FINGERPRINT_FRAMES)

        log(f"[INFO] FeatureStage: Completed ({len(vectors)} -> {len(ctx.features.rows)} rows)")
        return ctx

    except Exception as e:
        ctx.error = str(e)
        error(f"[ERROR] FeatureStage: {e}")
        return ctx
