"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from typing import Optional


logger = logging.getLogger(__name__)

_SHUFFLE_SEED_ENV = "MATCHLY_SHUFFLE_SEED"
_MAX_ROSTER_ENV = "MATCHLY_MAX_ROSTER"

_MAX_ROSTER_DEFAULT = 512


def env_int(name: str, default: Optional[int], *, min_value: int | None = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %s", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def shuffle_seed() -> Optional[int]:
    """Seed for roster shuffling, or ``None`` to use system randomness."""

    return env_int(_SHUFFLE_SEED_ENV, None)


def max_roster_size() -> int:
    value = env_int(_MAX_ROSTER_ENV, _MAX_ROSTER_DEFAULT, min_value=1)
    if value is None:
        return _MAX_ROSTER_DEFAULT
    return value
