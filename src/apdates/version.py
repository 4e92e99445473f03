"""Version information for the apdates package."""

from __future__ import annotations

from typing import Final

__all__ = ["VERSION", "VERSION_ID", "MAJOR", "MINOR", "PATCH", "EXTRA"]

MAJOR: Final = 1
MINOR: Final = 0
PATCH: Final = 0
EXTRA: Final = ""

VERSION: Final = f"{MAJOR}.{MINOR}.{PATCH}{EXTRA}"

# Sortable integer form: MAJOR * 100000 + MINOR * 100 + PATCH.
VERSION_ID: Final = MAJOR * 100000 + MINOR * 100 + PATCH
