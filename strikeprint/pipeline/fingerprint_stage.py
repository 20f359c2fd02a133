from datetime import datetime, timezone

from strikeprint.models.context import Context
from strikeprint.models.fingerprint_model import FINGERPRINT_VERSION, FingerprintModel
from strikeprint.utils.logger import error, log


def iso_now() -> str:
    """UTC timestamp with milliseconds and a trailing Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def run(ctx: Context) -> Context:
    if ctx.error:
        return ctx

    if ctx.metrics is None or not ctx.features.rows:
        ctx.error = "Missing metrics or feature rows"
        error(f"[ERROR] FingerprintStage: {ctx.error}")
        return ctx

    ctx.fingerprint = FingerprintModel(
        name=ctx.input.name,
        performer=ctx.input.performer,
        stance_original=ctx.input.stance,
        height_cm=ctx.input.height_cm,
        created_at=iso_now(),
        version=FINGERPRINT_VERSION,
        metrics=ctx.metrics,
        frames=len(ctx.features.rows),
        fingerprint=ctx.features.rows,
    )

    log(f"[INFO] FingerprintStage: '{ctx.input.name}' built ({ctx.fingerprint.frames} frames)")
    return ctx
