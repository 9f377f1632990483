"""Single-file daily cache for the rendered rates document."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

from cbs_rates.errors import CacheReadError, CacheWriteError
from cbs_rates.utils.calendar import local_date_from_timestamp
from cbs_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

CACHE_FILE_MODE = 0o644


def is_fresh(path: str | Path, today: date | None = None) -> bool:
    """Return ``True`` when ``path`` exists and was modified on ``today``.

    Only the calendar date is compared; the time of day is ignored. A missing
    file is simply not fresh; any other stat failure raises
    :class:`~cbs_rates.errors.CacheReadError`.
    """

    try:
        modified = Path(path).stat().st_mtime
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise CacheReadError(Path(path), exc) from exc
    return local_date_from_timestamp(modified) == (today or date.today())


class RatesCache:
    """Read and write the cached rates document at a fixed path."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"RatesCache(path={str(self.path)!r})"

    def is_fresh(self, today: date | None = None) -> bool:
        return is_fresh(self.path, today)

    def write(self, document: str) -> Path:
        """Persist ``document`` verbatim and return the cache path."""

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(document)
            os.chmod(self.path, CACHE_FILE_MODE)
        except OSError as exc:
            raise CacheWriteError(self.path, exc) from exc
        LOGGER.debug("Cached %s characters of rates markup in %s", len(document), self.path)
        return self.path

    def read(self) -> str:
        """Return the cached document."""

        try:
            with self.path.open("r", encoding="utf-8", newline="") as handle:
                document = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise CacheReadError(self.path, exc) from exc
        LOGGER.debug("Loaded cached rates markup from %s", self.path)
        return document


__all__ = ["CACHE_FILE_MODE", "RatesCache", "is_fresh"]
