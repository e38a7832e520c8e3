import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ``mdreflink`` namespace."""
    return logging.getLogger(f"mdreflink.{name}")
