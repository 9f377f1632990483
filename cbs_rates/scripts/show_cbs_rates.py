"""CLI entry point for printing the CBS daily rates."""

from __future__ import annotations

from cbs_rates.daily_rates import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
