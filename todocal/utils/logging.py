"""Root logger setup for the web entrypoint.

``TODOCAL_LOG_LEVEL`` names the level explicitly (``debug``, ``WARNING``, ``10``);
otherwise a truthy ``TODOCAL_DEBUG`` selects DEBUG. Unknown names fall back to
INFO.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "TODOCAL_LOG_LEVEL"
DEBUG_ENV = "TODOCAL_DEBUG"


def parse_level(text: Optional[str], fallback: int = logging.INFO) -> int:
    """Map a level name or number to a ``logging`` level."""
    token = (text or "").strip()
    if not token:
        return fallback
    if token.isdigit():
        return int(token)
    level = logging.getLevelName(token.upper())
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or None when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit)
    if (env.get(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Install the compact root handler once and return the effective level."""
    if isinstance(default_level, str):
        default_level = parse_level(default_level)
    forced = env_level()
    effective = default_level if forced is None else forced

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def level_name(level: int) -> str:
    return logging.getLevelName(level)
