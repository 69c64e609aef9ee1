"""Pytest configuration and fixtures."""

import pytest
import structlog

from amm_pricing.pool import PoolState
from tests.helpers import make_pool


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def example_pool() -> PoolState:
    """The documented example pool (equal weights, 30 pip fee)."""
    return make_pool()


@pytest.fixture
def weighted_pool() -> PoolState:
    """An 80/20 weighted pool over the example reserves."""
    return make_pool(weight_in=80, weight_out=20)
