import json
import logging

from teenhealth.core.config import settings

logger = logging.getLogger("teenhealth.debug")


def configure_logging(level: str = None):
    """Configure the root logger once at startup."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if settings.DEBUG_MODE:
        logger.setLevel(logging.DEBUG)


def log_debug(event: str, data: dict):
    """
    Logs structured debug info if enabled.
    """
    if not settings.DEBUG_MODE:
        return

    logger.debug("%s: %s", event, json.dumps(data, indent=2, default=str))
