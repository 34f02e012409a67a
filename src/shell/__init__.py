"""Shell — интерактивное текстовое меню поверх каталога и заказов.

- parsing: разбор введённого текста в типизированные значения с default-ами
- catalog: упорядоченные коллекции товаров и заказов
- menu: цикл меню
"""

from .catalog import Catalog, OrderBook, demo_catalog
from .menu import BookshopShell, format_confirmation
from .parsing import parse_periodicity, parse_positive_int, parse_price, parse_yes

__all__ = [
    "Catalog",
    "OrderBook",
    "demo_catalog",
    "BookshopShell",
    "format_confirmation",
    "parse_periodicity",
    "parse_positive_int",
    "parse_price",
    "parse_yes",
]
