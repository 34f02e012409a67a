"""Menu — интерактивный цикл магазина.

Опции:
- 1: показать каталог
- 2: добавить публикацию
- 3: добавить периодическое издание
- 4: оформить заказ
- 5: показать заказы
- 0: выход

Ввод и вывод передаются как функции (read(prompt) -> str, write(text)),
поэтому сессию можно прогнать в тестах без консоли. Конец ввода (EOFError)
завершает цикл так же, как опция 0.
"""

import logging
from collections.abc import Callable

from src.core.config import OrderingConfig
from src.core.domain.catalog import Periodical, Publication, is_periodical
from src.core.domain.order import Order, OrderIdSequence, OrderPlacedEvent
from src.core.math.pricing import format_price
from src.shell.catalog import Catalog, OrderBook, demo_catalog
from src.shell.parsing import parse_periodicity, parse_positive_int, parse_price, parse_yes

logger = logging.getLogger(__name__)

CURRENCY_SIGN = "€"

MENU = "\n".join(
    [
        "",
        "Main menu:",
        "1. Show catalog",
        "2. Add new book",
        "3. Add new periodical",
        "4. Place order",
        "5. Show orders",
        "0. Exit",
    ]
)


def format_confirmation(event: OrderPlacedEvent) -> str:
    """Баннер подтверждения заказа для вывода пользователю"""
    return "\n".join(
        [
            "",
            "=== ORDER CONFIRMATION ===",
            f"Product: {event.item_display_name}",
            f"Quantity: {event.quantity}",
            f"Total price: {CURRENCY_SIGN}{format_price(event.total_price)}",
            "==========================",
            "",
        ]
    )


class BookshopShell:
    """Текстовое меню каталога и заказов."""

    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        catalog: Catalog | None = None,
        orders: OrderBook | None = None,
        config: OrderingConfig | None = None,
        id_sequence: OrderIdSequence | None = None,
    ):
        self.read = read
        self.write = write
        self.catalog = catalog if catalog is not None else demo_catalog()
        self.orders = orders if orders is not None else OrderBook()
        self.config = config or OrderingConfig()
        self.id_sequence = id_sequence

        self._actions: dict[str, Callable[[], None]] = {
            "1": self.show_catalog,
            "2": self.add_publication,
            "3": self.add_periodical,
            "4": self.place_order,
            "5": self.show_orders,
        }

    def run(self) -> None:
        self.write("===== Bookshop Ordering System =====")

        while True:
            self.write(MENU)
            try:
                choice = self.read("\nYour choice: ").strip()
                if choice == "0":
                    break
                action = self._actions.get(choice)
                if action is None:
                    self.write("Invalid option, please try again.")
                    continue
                action()
            except EOFError:
                break

        self.write("\nThank you for using our ordering system. Goodbye!")

    # -------------------------------------------------------------------------
    # Каталог
    # -------------------------------------------------------------------------

    def show_catalog(self) -> None:
        self.write("\n=== CATALOG ===")
        for number, item in enumerate(self.catalog, start=1):
            self.write(f"{number}. {item.describe()}")

    def _read_item_fields(self) -> dict:
        return {
            "id": self.read("ID: "),
            "title": self.read("Title: "),
            "publisher": self.read("Publisher: "),
            "price": parse_price(self.read(f"Price ({CURRENCY_SIGN}): ")),
        }

    def add_publication(self) -> None:
        self.write("\nEnter the details of the new book:")
        item = Publication(**self._read_item_fields())
        self.catalog.add(item)
        logger.info("Publication %s added to catalog", item.identifier())
        self.write("Book added successfully!")

    def add_periodical(self) -> None:
        self.write("\nEnter the details of the new periodical:")
        fields = self._read_item_fields()
        fields["periodicity"] = parse_periodicity(
            self.read("Periodicity (0=Daily, 1=Weekly, 2=Monthly): ")
        )
        item = Periodical(**fields)
        self.catalog.add(item)
        logger.info("Periodical %s added to catalog", item.identifier())
        self.write("Periodical added successfully!")

    # -------------------------------------------------------------------------
    # Заказы
    # -------------------------------------------------------------------------

    def _notify(self, event: OrderPlacedEvent) -> None:
        self.write(format_confirmation(event))

    def place_order(self) -> None:
        self.write("\n=== NEW ORDER ===")
        self.write("Choose a product from the catalog (number):")
        for number, item in enumerate(self.catalog, start=1):
            self.write(
                f"{number}. {item.display_name()} - {CURRENCY_SIGN}{format_price(item.price)}"
            )

        item = self.catalog.select(parse_positive_int(self.read("")))
        if item is None:
            self.write("Invalid selection.")
            return

        quantity = parse_positive_int(self.read("Quantity: "))
        if quantity is None:
            self.write("Invalid quantity.")
            return

        subscription_months = None
        if is_periodical(item) and parse_yes(
            self.read("Is this a subscription? (Y/N): ")
        ):
            subscription_months = parse_positive_int(
                self.read("Subscription length in months: ")
            )

        order = Order.create(
            item,
            quantity,
            subscription_months,
            id_sequence=self.id_sequence,
            config=self.config,
        )
        order.on_placed(self._notify)
        confirmation = order.finalize()
        self.orders.add(order)

        logger.info(
            "Order #%d placed: item=%s total=%s",
            order.order_id,
            confirmation.item_id,
            confirmation.total_price,
        )

    def show_orders(self) -> None:
        self.write("\n=== PLACED ORDERS ===")
        if not len(self.orders):
            self.write("No orders have been placed yet.")
            return

        for order in self.orders:
            self.write(order.describe())
            self.write("-------------------------")
