"""
Test suite for the orderfees structured logger.
"""

import pytest

from orderfees.config import SystemConfig
from orderfees.logger import OrderFeesStructLogger, get_orderfees_logger, init_logger


class TestOrderFeesStructLogger:

    def test_bind_returns_new_logger(self):
        parent = OrderFeesStructLogger("orderfees", service="fees")

        child = parent.bind(component="BinanceFeeModel")

        assert child is not parent
        assert child._values == {"service": "fees", "component": "BinanceFeeModel"}
        assert parent._values == {"service": "fees"}

    def test_sibling_binds_do_not_leak(self):
        root = OrderFeesStructLogger("orderfees")

        first = root.bind(component="ZeroFeeModel")
        second = root.bind(component="PercentFeeModel")

        assert first._values["component"] == "ZeroFeeModel"
        assert second._values["component"] == "PercentFeeModel"

    def test_init_logger_sets_package_logger(self):
        logger = init_logger(SystemConfig.from_env({}))

        assert get_orderfees_logger() is logger
        logger.debug("Logger ready", component="test")


# Pytest marks for categorizing tests
pytestmark = pytest.mark.unit
