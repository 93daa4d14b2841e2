"""Logging setup for the command line and for hosts embedding the engine.

Library modules only create loggers under ``verse_phonetics``; handlers are
attached here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

LOG_LEVEL_ENV = "VERSE_PHONETICS_LOG_LEVEL"
LOG_FORMAT_ENV = "VERSE_PHONETICS_LOG_FORMAT"

PACKAGE_LOGGER = "verse_phonetics"

LOG_FORMATS: Mapping[str, str] = {
    "detailed": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    "brief": "%(levelname)s %(name)s: %(message)s",
}
DEFAULT_LOG_FORMAT = "detailed"

_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    """Map a level name, numeric string or int onto a logging level.

    Unrecognised values fall back to ``INFO`` rather than failing start-up.
    """

    if isinstance(level, int):
        return level
    text = (level or "").strip()
    if text.isdigit():
        return int(text)
    # getLevelName maps registered names back to their numeric value.
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _resolve_format(name: Optional[str]) -> str:
    key = (name or DEFAULT_LOG_FORMAT).strip().lower()
    return LOG_FORMATS.get(key, LOG_FORMATS[DEFAULT_LOG_FORMAT])


def configure_logging(
    level: Optional[str | int] = None,
    *,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> int:
    """Attach a stream handler to the root logger and set the package level.

    ``level`` and ``log_format`` default to the ``VERSE_PHONETICS_LOG_LEVEL``
    and ``VERSE_PHONETICS_LOG_FORMAT`` environment variables. Output goes to
    ``stream`` (stderr by default) so command output on stdout stays clean.
    Later calls are no-ops unless ``force`` is set.

    Returns the numeric level applied to the ``verse_phonetics`` logger.
    """

    global _CONFIGURED

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _CONFIGURED and not force:
        return package_logger.getEffectiveLevel()

    resolved_level = _resolve_level(level if level is not None else os.environ.get(LOG_LEVEL_ENV))
    fmt = _resolve_format(log_format if log_format is not None else os.environ.get(LOG_FORMAT_ENV))

    logging.basicConfig(
        level=resolved_level,
        format=fmt,
        stream=stream if stream is not None else sys.stderr,
        force=force,
    )
    package_logger.setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = [
    "configure_logging",
    "DEFAULT_LOG_FORMAT",
    "LOG_FORMATS",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
]
