"""Тесты для OrderingConfig"""

import pytest

from src.core.config import DEFAULT_DATE_FORMAT, OrderingConfig
from src.core.math.pricing import SubscriptionQuantityPolicy


class TestOrderingConfig:
    def test_defaults(self) -> None:
        config = OrderingConfig()
        assert config.subscription_quantity_policy is SubscriptionQuantityPolicy.IGNORE_QUANTITY
        assert config.date_format == DEFAULT_DATE_FORMAT

    def test_frozen(self) -> None:
        config = OrderingConfig()
        with pytest.raises(AttributeError):
            config.date_format = "%Y"  # type: ignore

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BOOKSHOP_SUBSCRIPTION_QUANTITY_POLICY", raising=False)
        monkeypatch.delenv("BOOKSHOP_DATE_FORMAT", raising=False)
        assert OrderingConfig.from_env() == OrderingConfig()

    def test_from_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOOKSHOP_SUBSCRIPTION_QUANTITY_POLICY", " Multiply_By_Quantity ")
        monkeypatch.setenv("BOOKSHOP_DATE_FORMAT", "%Y-%m-%d")
        config = OrderingConfig.from_env()
        assert config.subscription_quantity_policy is SubscriptionQuantityPolicy.MULTIPLY_BY_QUANTITY
        assert config.date_format == "%Y-%m-%d"

    def test_from_env_unknown_policy_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOOKSHOP_SUBSCRIPTION_QUANTITY_POLICY", "per_copy")
        config = OrderingConfig.from_env()
        assert config.subscription_quantity_policy is SubscriptionQuantityPolicy.IGNORE_QUANTITY
