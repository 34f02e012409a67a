"""
OrderingConfig — Конфигурация оформления заказов

Frozen dataclass с параметрами по умолчанию. Может быть собрана из
переменных окружения через OrderingConfig.from_env().

Переменные окружения:
- BOOKSHOP_SUBSCRIPTION_QUANTITY_POLICY: ignore_quantity | multiply_by_quantity
- BOOKSHOP_DATE_FORMAT: strftime-формат даты в описании заказа
"""

import logging
import os
from dataclasses import dataclass

from src.core.math.pricing import SubscriptionQuantityPolicy

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class OrderingConfig:
    """Конфигурация расчёта и описания заказов.

    subscription_quantity_policy:
        IGNORE_QUANTITY — подписка считается без учёта количества экземпляров
        (исходное поведение системы). MULTIPLY_BY_QUANTITY — с учётом.
    """

    subscription_quantity_policy: SubscriptionQuantityPolicy = (
        SubscriptionQuantityPolicy.IGNORE_QUANTITY
    )
    date_format: str = DEFAULT_DATE_FORMAT

    @classmethod
    def from_env(cls) -> "OrderingConfig":
        raw_policy = os.getenv(
            "BOOKSHOP_SUBSCRIPTION_QUANTITY_POLICY",
            SubscriptionQuantityPolicy.IGNORE_QUANTITY.value,
        )
        try:
            policy = SubscriptionQuantityPolicy(raw_policy.strip().lower())
        except ValueError:
            logger.warning(
                "Unknown subscription quantity policy %r, using %s",
                raw_policy,
                SubscriptionQuantityPolicy.IGNORE_QUANTITY.value,
            )
            policy = SubscriptionQuantityPolicy.IGNORE_QUANTITY

        return cls(
            subscription_quantity_policy=policy,
            date_format=os.getenv("BOOKSHOP_DATE_FORMAT", DEFAULT_DATE_FORMAT),
        )
