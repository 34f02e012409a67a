"""
Domain models and value objects.

Contains catalog items (Publication, Periodical) and the generic Order
with its confirmation and placed-event payloads.
"""

from src.core.domain.catalog import (
    CATALOG_ITEM_ADAPTER,
    ISSUES_PER_MONTH,
    CatalogItem,
    Periodical,
    Periodicity,
    Publication,
    is_periodical,
    issues_per_month,
    parse_catalog_item,
    subscription_issue_rate,
)
from src.core.domain.order import (
    DEFAULT_ORDER_ID_SEQUENCE,
    Order,
    OrderConfirmation,
    OrderIdSequence,
    OrderPlacedEvent,
    OrderPlacedObserver,
)

__all__ = [
    # Catalog
    "CatalogItem",
    "CATALOG_ITEM_ADAPTER",
    "Publication",
    "Periodical",
    "Periodicity",
    "ISSUES_PER_MONTH",
    "issues_per_month",
    "is_periodical",
    "subscription_issue_rate",
    "parse_catalog_item",
    # Order
    "Order",
    "OrderIdSequence",
    "DEFAULT_ORDER_ID_SEQUENCE",
    "OrderConfirmation",
    "OrderPlacedEvent",
    "OrderPlacedObserver",
]
