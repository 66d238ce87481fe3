"""Configuration constants and .env loading.

WHY: Buffer sizes, output formatting switches, and the usage-text links
are plain data, not logic. Keeping them in one module means they are easy
to find and override without touching the pipeline.

HOW: python-dotenv loads the .env file on import. Constants are defined
at module level with os.getenv overrides where an override makes sense.

RULES:
- MIN_PLIST_SIZE is fixed: no encoding of any supported format is shorter
- STDIN_BUFFER_SIZE is both the initial capacity and the growth step of
  the stdin byte sink
- Boolean switches accept "1", "true", "yes" and "on" (case-insensitive)
- All other defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the directory the tool is run from
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean switch from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment.

    RULES:
    - Missing, malformed, or non-positive values fall back to the default
    """
    raw = os.getenv(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# ---------------------------------------------------------------------------
# Input acquisition
# ---------------------------------------------------------------------------

MIN_PLIST_SIZE = 8
"""Smallest payload that can hold a valid plist in any supported format."""

STDIN_BUFFER_SIZE = _env_int("PLISTUTIL_STDIN_BUFFER_SIZE", 4096)

STDIO_SENTINEL = "-"
"""Path value that selects stdin (for -i) or stdout (for -o)."""

# ---------------------------------------------------------------------------
# Codec behaviour
# ---------------------------------------------------------------------------

BINARY_MAGIC = b"bplist00"

JSON_PRETTY = _env_flag("PLISTUTIL_JSON_PRETTY", False)
SORT_KEYS = _env_flag("PLISTUTIL_SORT_KEYS", False)

# ---------------------------------------------------------------------------
# Logging and usage text
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("PLISTUTIL_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

PACKAGE_URL = os.getenv("PLISTUTIL_PACKAGE_URL", "https://libimobiledevice.org")
PACKAGE_BUGREPORT = os.getenv(
    "PLISTUTIL_PACKAGE_BUGREPORT",
    "https://github.com/libimobiledevice/libplist/issues",
)
