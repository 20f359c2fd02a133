from strikeprint.models.context import Context
from strikeprint.pipeline.mirror import mirror
from strikeprint.utils.logger import error, log


def run(ctx: Context) -> Context:
    """
    Southpaw clips are converted to the orthodox convention before any
    metric or feature is computed.
    """
    if ctx.error or ctx.window.window is None:
        return ctx

    try:
        log("[INFO] MirrorStage: Starting")

        if ctx.input.stance == "southpaw":
            window = ctx.window.window
            ctx.window.window = window.with_poses(mirror(window.poses))
            ctx.window.mirrored = True
            log("[INFO] MirrorStage: southpaw clip mirrored to orthodox")

        return ctx

    except Exception as e:
        ctx.error = str(e)
        error(f"[ERROR] MirrorStage: {e}")
        return ctx
