import sys
import logging

from strikeprint.utils.settings import LOG_LEVEL

# --------------------------------------------------------
# Create a unified logger for all StrikePrint modules
# --------------------------------------------------------
LOGGER_NAME = "strikeprint"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(LOG_LEVEL)

# If no handlers exist, add one (avoid duplicate logs)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.propagate = False  # Prevent duplicate uvicorn logs


def log(msg):
    """
    Default stage logging at INFO.
    Callers tag the message themselves ("[INFO] Stage: ...").
    """
    logger.info(msg)


# Explicit level helpers
def warn(msg):
    logger.warning(msg)

def error(msg):
    logger.error(msg)
