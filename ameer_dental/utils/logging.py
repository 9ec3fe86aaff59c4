"""
Logging helpers.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the whole process."""
    global _configured
    if _configured:
        return
    logging.basicConfig(level=(level or "INFO").upper(), format=LOG_FORMAT)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, e.g. ``get_logger("ameer.booking")``."""
    return logging.getLogger(name)
