from __future__ import annotations

import logging

from cbs_rates.utils.logger import get_logger, set_verbosity


def test_module_loggers_share_the_package_namespace() -> None:
    logger = get_logger("cbs_rates.daily_rates")

    assert logger.name == "cbs_rates.daily_rates"
    assert logger.parent is get_logger()


def test_set_verbosity_toggles_debug() -> None:
    try:
        set_verbosity(True)
        assert get_logger().level == logging.DEBUG
    finally:
        set_verbosity(False)
    assert get_logger().level == logging.INFO
