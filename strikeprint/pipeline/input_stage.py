from strikeprint.models.context import Context
from strikeprint.utils.logger import error, log

DEFAULT_HEIGHT_CM = 170
DEFAULT_PERFORMER = "Unknown"


def run(ctx: Context) -> Context:
    """
    Validate and complete the recording metadata.
    """
    if ctx.error:
        return ctx

    try:
        log("[INFO] InputStage: Starting")

        name = (ctx.input.name or "").strip()
        if not name:
            ctx.error = "Technique name is required"
            error(f"[ERROR] InputStage: {ctx.error}")
            return ctx

        ctx.input.name = name
        ctx.input.performer = (ctx.input.performer or "").strip() or DEFAULT_PERFORMER

        if not ctx.input.height_cm or ctx.input.height_cm <= 0:
            ctx.input.height_cm = DEFAULT_HEIGHT_CM

        log(f"[INFO] InputStage: Completed ('{name}', {ctx.input.height_cm} cm)")
        return ctx

    except Exception as e:
        ctx.error = str(e)
        error(f"[ERROR] InputStage: {e}")
        return ctx
