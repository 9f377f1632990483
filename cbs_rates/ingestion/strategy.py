"""Abstractions for pluggable page renderers."""

from __future__ import annotations

from typing import Protocol


class PageRenderer(Protocol):
    """Contract for turning a URL into its final markup.

    Implementations may drive a real browser or issue a plain HTTP request;
    callers only rely on :meth:`render` returning the document as text and on
    :meth:`close` releasing whatever resources were acquired.
    """

    def render(self, url: str) -> str:
        ...  # pragma: no cover - protocol definition

    def close(self) -> None:
        ...  # pragma: no cover - protocol definition


__all__ = ["PageRenderer"]
