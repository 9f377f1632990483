"""Package loggers; diagnostics go to stderr so stdout only carries the report."""

from __future__ import annotations

import logging
from typing import Optional

_ROOT_NAME = "cbs_rates"
_CONFIGURED: Optional[logging.Logger] = None


def get_logger(name: str = _ROOT_NAME) -> logging.Logger:
    """Return ``name``'s logger, installing the shared handler on first use."""
    global _CONFIGURED
    if _CONFIGURED is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _CONFIGURED = logging.getLogger(_ROOT_NAME)
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package loggers between INFO and DEBUG."""

    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
