import logging
import sys

# -------------------------------------------------------------------
# Logging configuration
# -------------------------------------------------------------------
LOGGER_NAME = "grammar_tutor"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

# Guard against a second handler when the module is re-imported (uvicorn reload)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(message)s",
        "%Y-%m-%d %H:%M:%S"
    )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

# Avoid duplicate logs
logger.propagate = False
