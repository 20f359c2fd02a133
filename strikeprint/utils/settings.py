# strikeprint/utils/settings.py
"""
Deployment settings read from the environment.

Algorithm tunables stay next to the code that uses them; only values that
change between machines live here.
"""

import logging
import os

DEFAULT_LOG_LEVEL = "DEBUG"


def resolve_log_level(value):
    """Map a level name to a known logging level; unknown names fall back to DEBUG."""
    name = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


# Persistence collaborator endpoint (POST target for finished documents)
SINK_URL = os.getenv("STRIKEPRINT_SINK_URL") or None
SINK_TIMEOUT = float(os.getenv("STRIKEPRINT_SINK_TIMEOUT", "10"))

LOG_LEVEL = resolve_log_level(os.getenv("STRIKEPRINT_LOG_LEVEL"))
