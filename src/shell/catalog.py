"""Упорядоченные in-memory коллекции каталога и заказов"""

from collections.abc import Iterator

from src.core.domain.catalog import Periodical, Periodicity, Publication
from src.core.domain.order import Order


class Catalog:
    """Каталог: товары в порядке добавления, выбор по номеру с 1"""

    def __init__(self, items: list[Publication | Periodical] | None = None):
        self._items: list[Publication | Periodical] = list(items or [])

    def add(self, item: Publication | Periodical) -> None:
        self._items.append(item)

    def select(self, number: int | None) -> Publication | Periodical | None:
        """Товар по номеру (1..len) или None, если номер вне диапазона"""
        if number is None or not 1 <= number <= len(self._items):
            return None
        return self._items[number - 1]

    def __iter__(self) -> Iterator[Publication | Periodical]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class OrderBook:
    """Оформленные заказы в порядке оформления"""

    def __init__(self):
        self._orders: list[Order] = []

    def add(self, order: Order) -> None:
        self._orders.append(order)

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def __len__(self) -> int:
        return len(self._orders)


def demo_catalog() -> Catalog:
    """Каталог с двумя книгами и двумя периодическими изданиями"""
    return Catalog(
        [
            Publication(
                id="978-0-306-40615-7",
                title="De Kleine Prins",
                publisher="Uitgeverij J.M. Meulenhoff",
                price="12.99",
            ),
            Publication(
                id="978-3-16-148410-0",
                title="Honderd jaar eenzaamheid",
                publisher="De Geus",
                price="18.50",
            ),
            Periodical(
                id="977-1234-56789",
                title="Wetenschap & Leven",
                publisher="Sanoma Media",
                price="6.95",
                periodicity=Periodicity.MONTHLY,
            ),
            Periodical(
                id="977-9876-54321",
                title="De Volkskrant",
                publisher="DPG Media",
                price="2.50",
                periodicity=Periodicity.DAILY,
            ),
        ]
    )
