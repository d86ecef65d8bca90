"""
Process-wide logging setup.

Modules log through ``logging.getLogger(__name__)``; this module only
installs the root handler and level once, at application creation.
"""

# Standard library imports
import logging
import sys
from typing import Optional

# Local application imports
from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _parse_level(value: Optional[str]) -> int:
    """Map a level name such as 'debug' or 'INFO' to a logging constant."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None, force: bool = False) -> logging.Logger:
    """
    Install a stream handler on the root logger and return the service logger.
    
    Args:
        level: Level name; falls back to the LOG_LEVEL setting
        force: Reconfigure even if logging was already set up
        
    Returns:
        The ``devconnect`` logger
    """
    global _configured
    if _configured and not force:
        return logging.getLogger("devconnect")
    
    resolved = _parse_level(level or get_settings().log_level)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=force,
    )
    logging.getLogger("devconnect").setLevel(resolved)
    _configured = True
    return logging.getLogger("devconnect")
