from strikeprint.models.context import Context
from strikeprint.pipeline.input_stage import run as input_stage
from strikeprint.pipeline.trim_stage import run as trim_stage
from strikeprint.pipeline.mirror_stage import run as mirror_stage
from strikeprint.pipeline.metrics_stage import run as metrics_stage
from strikeprint.pipeline.feature_stage import run as feature_stage
from strikeprint.pipeline.fingerprint_stage import run as fingerprint_stage


def build_fingerprint(recording, frames) -> Context:
    """
    Full clip -> fingerprint pipeline. Check `ctx.error` before reading
    `ctx.fingerprint`.
    """
    ctx = Context(input=recording, frames=list(frames))

    ctx = input_stage(ctx)
    ctx = trim_stage(ctx)
    ctx = mirror_stage(ctx)
    ctx = metrics_stage(ctx)
    ctx = feature_stage(ctx)
    ctx = fingerprint_stage(ctx)

    return ctx
