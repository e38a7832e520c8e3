import logging
import os
import sys

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure mdreflink logging.

    Stdout carries the rewritten Markdown, so log records always go to stderr.

    Args:
        level: Logging level. If None, read from ``MDREFLINK_LOG_LEVEL`` (default WARNING).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if level is None:
        level = os.environ.get("MDREFLINK_LOG_LEVEL", "WARNING").upper()

    root_logger = logging.getLogger("mdreflink")
    root_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    _CONFIGURED = True
