"""Runtime settings resolved from ``CRYFA_*`` environment variables.

Values are plain module attributes and are read at call time, so callers
(and tests) may override them after import.
"""

import os
import typing


def _env_int(name: str) -> typing.Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return None
    if parsed <= 0:
        return None
    return parsed


def _env_choice(name: str, default: str, choices: typing.Tuple[str, ...]) -> str:
    value = (os.getenv(name) or "").strip().lower()
    if value in choices:
        return value
    return default


MAX_INPUT_BYTES = _env_int("CRYFA_MAX_INPUT_BYTES") or 4 * 1024 * 1024 * 1024  # whole file is held in memory

# "division" reproduces files written by cryfa v1.1 builds; "lemire" matches
# binaries compiled against newer libstdc++ (GCC 11+).
BYTE_SAMPLER = _env_choice("CRYFA_BYTE_SAMPLER", "division", ("division", "lemire"))

# "literal" searches the fixed v1.1 watermark on decrypt, "current" the one
# built from VERSION/RELEASE.
WATERMARK_MATCH = _env_choice("CRYFA_WATERMARK_MATCH", "literal", ("literal", "current"))

USE_COLOR = os.getenv("CRYFA_COLOR", "1") == "1"
