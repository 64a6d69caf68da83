"""Defaults for the command line, overridable from the environment.

``TERMSTRING_STRICT``  -- reject malformed control sequences (``1/true/yes/on``).
``TERMSTRING_PAD_CHAR`` -- single character used for padding.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

STRICT_ENV = "TERMSTRING_STRICT"
PAD_CHAR_ENV = "TERMSTRING_PAD_CHAR"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass
class Settings:
    """Parsing and padding defaults."""

    strict: bool = False
    pad_char: str = " "


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (``os.environ`` by default)."""
    env = os.environ if environ is None else environ
    settings = Settings()

    strict = env.get(STRICT_ENV)
    if strict is not None:
        settings.strict = strict.strip().lower() in _TRUTHY

    pad_char = env.get(PAD_CHAR_ENV)
    if pad_char is not None:
        if len(pad_char) == 1:
            settings.pad_char = pad_char
        else:
            logger.warning("Ignoring %s=%r: expected a single character", PAD_CHAR_ENV, pad_char)

    return settings
