"""Helpers for the on-disk copy of the CBS rates page."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from cbs_rates.cache.file_cache import RatesCache, is_fresh

__all__ = ["DEFAULT_CACHE_PATH", "RatesCache", "is_fresh"]

# CBS publishes at most one page per business day, so a single file under /tmp
# is enough; its mtime doubles as the capture date.
DEFAULT_CACHE_PATH: Final[Path] = Path("/tmp/cbsrates.html")
