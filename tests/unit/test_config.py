"""Tests for pricing configuration."""

import pytest

from amm_pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig


class TestPricingConfig:
    """Tests for PricingConfig."""

    def test_defaults(self):
        """Default config uses 30 pips and exact pricing for equal weights."""
        assert DEFAULT_PRICING_CONFIG.default_fee == 30
        assert DEFAULT_PRICING_CONFIG.prefer_exact_for_equal_weights is True

    def test_frozen(self):
        """Config is immutable."""
        with pytest.raises(AttributeError):
            DEFAULT_PRICING_CONFIG.default_fee = 5  # type: ignore[misc]

    @pytest.mark.parametrize("fee", [-1, 10_000])
    def test_invalid_default_fee(self, fee):
        """Default fee must be in [0, 10000)."""
        with pytest.raises(ValueError):
            PricingConfig(default_fee=fee)

    def test_from_env_defaults(self, monkeypatch):
        """Missing variables fall back to defaults."""
        monkeypatch.delenv("AMM_PRICING_DEFAULT_FEE", raising=False)
        monkeypatch.delenv("AMM_PRICING_PREFER_EXACT", raising=False)
        assert PricingConfig.from_env() == PricingConfig()

    def test_from_env_overrides(self, monkeypatch):
        """Variables override the defaults."""
        monkeypatch.setenv("AMM_PRICING_DEFAULT_FEE", "25")
        monkeypatch.setenv("AMM_PRICING_PREFER_EXACT", "no")
        config = PricingConfig.from_env()
        assert config.default_fee == 25
        assert config.prefer_exact_for_equal_weights is False

    @pytest.mark.parametrize("raw", ["abc", "12000"])
    def test_from_env_invalid_fee(self, monkeypatch, raw):
        """Non-integer or out-of-range fees are rejected."""
        monkeypatch.setenv("AMM_PRICING_DEFAULT_FEE", raw)
        with pytest.raises(ValueError):
            PricingConfig.from_env()
