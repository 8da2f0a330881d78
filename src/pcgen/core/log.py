#!/usr/bin/env python3
"""
Logging setup for pcgen, driven by the ``logging`` section of the config.
"""

import logging
from typing import Any, Dict, Final

LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def configure_logging(config: Dict[str, Any]) -> int:
    """
    Configure root logging from ``config["logging"]["level"]``.

    Returns:
        The numeric level applied.

    Raises:
        ValueError: if the level name is not a standard logging level.
    """
    name = str(config.get("logging", {}).get("level", "INFO")).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("pcgen").setLevel(level)
    return level
