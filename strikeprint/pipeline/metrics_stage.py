from strikeprint.models.context import Context
from strikeprint.pipeline.motion_metrics import compute_metrics
from strikeprint.utils.logger import error, log


def run(ctx: Context) -> Context:
    if ctx.error:
        return ctx

    try:
        log("[INFO] MetricsStage: Starting")

        if ctx.window.window is None:
            ctx.error = "Missing motion window"
            return ctx

        ctx.metrics = compute_metrics(ctx.window.window, ctx.input.height_cm)

        m = ctx.metrics
        log(
            f"[INFO] MetricsStage: Completed part={m.active_part} apex={m.apex_frame} "
            f"out={m.max_speed_outbound} ret={m.max_speed_return} dur={m.duration_sec}"
        )
        return ctx

    except Exception as e:
        ctx.error = str(e)
        error(f"[ERROR] MetricsStage: {e}")
        return ctx
