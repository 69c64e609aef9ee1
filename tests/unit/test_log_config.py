"""Tests for structlog configuration and engine debug events."""

import structlog
from structlog.testing import capture_logs

from amm_pricing.engines import constant_product_engine, weighted_engine
from amm_pricing.engines.constant_product import get_amount_out
from amm_pricing.log_config import configure_logging
from amm_pricing.result import try_price
from tests.helpers import EXAMPLE_AMOUNT_IN, EXAMPLE_AMOUNT_OUT, make_pool


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_structlog(self):
        """configure_logging installs a filtering logger."""
        configure_logging(verbose=True)
        assert structlog.is_configured()

    def test_json_renderer(self):
        """json=True renders JSON lines."""
        configure_logging(json=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestEngineEvents:
    """Engines emit debug events with their inputs and outputs."""

    def test_constant_product_event(self):
        """constant_product_amount_out carries the amounts."""
        with capture_logs() as logs:
            constant_product_engine.get_amount_out(make_pool(), EXAMPLE_AMOUNT_IN)
        assert logs[0]["event"] == "constant_product_amount_out"
        assert logs[0]["amount_out"] == EXAMPLE_AMOUNT_OUT
        assert logs[0]["log_level"] == "debug"

    def test_weighted_event(self):
        """weighted_amount_in carries the weights."""
        with capture_logs() as logs:
            weighted_engine.get_amount_in(make_pool(weight_in=80, weight_out=20), EXAMPLE_AMOUNT_OUT)
        assert logs[0]["event"] == "weighted_amount_in"
        assert logs[0]["weight_in"] == 80

    def test_rejection_event(self):
        """try_price logs the rejected error kind."""
        with capture_logs() as logs:
            try_price(get_amount_out, 0, 100, 100)
        assert logs[0]["event"] == "pricing_rejected"
        assert logs[0]["error"] == "insufficient_input"

    def test_pure_functions_do_not_log(self):
        """Module-level engine functions are silent."""
        with capture_logs() as logs:
            get_amount_out(EXAMPLE_AMOUNT_IN, 100_000, 100_000)
        assert logs == []
