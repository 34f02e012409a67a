"""
Тесты для Shell: разбор ввода, коллекции, сессия меню

Сессии прогоняются через подставные read/write: read выдаёт заранее
заданные строки и бросает EOFError, когда они заканчиваются.
"""

from decimal import Decimal

import pytest

from src.core.domain import OrderIdSequence, OrderPlacedEvent, Periodical, Periodicity, Publication
from src.shell import (
    BookshopShell,
    Catalog,
    OrderBook,
    demo_catalog,
    format_confirmation,
    parse_periodicity,
    parse_positive_int,
    parse_price,
    parse_yes,
)


# =============================================================================
# HELPERS
# =============================================================================


class ScriptedConsole:
    """Подставной ввод/вывод для BookshopShell"""

    def __init__(self, *lines: str):
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def run_session(*lines: str, catalog: Catalog | None = None) -> tuple[BookshopShell, ScriptedConsole]:
    console = ScriptedConsole(*lines)
    shell = BookshopShell(
        read=console.read,
        write=console.write,
        catalog=catalog,
        id_sequence=OrderIdSequence(),
    )
    shell.run()
    return shell, console


# =============================================================================
# PARSING
# =============================================================================


class TestParsing:
    def test_parse_price(self) -> None:
        assert parse_price("12.99") == Decimal("12.99")
        assert parse_price("12,99") == Decimal("12.99")
        assert parse_price(" 75 ") == Decimal("75")
        assert parse_price("1e30") == Decimal("1E+30")

    @pytest.mark.parametrize("text", ["", "abc", "nan", None])
    def test_parse_price_default(self, text) -> None:
        assert parse_price(text) == Decimal("5")

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", Periodicity.DAILY),
            ("1", Periodicity.WEEKLY),
            ("2", Periodicity.MONTHLY),
            ("daily", Periodicity.DAILY),
            ("WEEKLY", Periodicity.WEEKLY),
            ("7", Periodicity.MONTHLY),
            ("yearly", Periodicity.MONTHLY),
            ("²", Periodicity.MONTHLY),
            ("①", Periodicity.MONTHLY),
            ("", Periodicity.MONTHLY),
            (None, Periodicity.MONTHLY),
        ],
    )
    def test_parse_periodicity(self, text, expected: Periodicity) -> None:
        assert parse_periodicity(text) is expected

    def test_parse_positive_int(self) -> None:
        assert parse_positive_int("3") == 3
        assert parse_positive_int(" 12 ") == 12
        assert parse_positive_int("0") is None
        assert parse_positive_int("-2") is None
        assert parse_positive_int("two") is None
        assert parse_positive_int(None) is None

    def test_parse_yes(self) -> None:
        assert parse_yes("J")
        assert parse_yes("y")
        assert parse_yes(" yes ")
        assert not parse_yes("N")
        assert not parse_yes("")
        assert not parse_yes(None)


# =============================================================================
# COLLECTIONS
# =============================================================================


class TestCollections:
    def test_demo_catalog(self) -> None:
        catalog = demo_catalog()
        assert len(catalog) == 4
        assert [type(item) for item in catalog] == [Publication, Publication, Periodical, Periodical]
        # 2.50 ограничивается минимальной ценой
        assert catalog.select(4).price == Decimal("5")

    def test_select_bounds(self) -> None:
        catalog = demo_catalog()
        assert catalog.select(1).title == "De Kleine Prins"
        assert catalog.select(0) is None
        assert catalog.select(5) is None
        assert catalog.select(None) is None

    def test_order_book_empty(self) -> None:
        assert len(OrderBook()) == 0

    def test_format_confirmation(self) -> None:
        event = OrderPlacedEvent(order_id=1, item_display_name="X", quantity=2, total_price=Decimal("25.9"))
        text = format_confirmation(event)
        assert "Product: X" in text
        assert "Quantity: 2" in text
        assert "Total price: €25.90" in text


# =============================================================================
# MENU SESSIONS
# =============================================================================


class TestMenuSession:
    def test_exit_immediately(self) -> None:
        shell, console = run_session("0")
        assert console.output[0] == "===== Bookshop Ordering System ====="
        assert console.output[-1].endswith("Goodbye!")
        assert len(shell.orders) == 0

    def test_end_of_input_exits(self) -> None:
        _, console = run_session()
        assert console.output[-1].endswith("Goodbye!")

    def test_unknown_option(self) -> None:
        _, console = run_session("9", "0")
        assert "Invalid option, please try again." in console.output

    def test_show_catalog(self) -> None:
        _, console = run_session("1", "0")
        expected = (
            "1. ID: 978-0-306-40615-7, Title: De Kleine Prins, "
            "Publisher: Uitgeverij J.M. Meulenhoff, Price: 12.99"
        )
        assert expected in console.output

    def test_add_publication_with_bad_price(self) -> None:
        shell, console = run_session("2", "X-1", "Test", "Pub", "abc", "1", "0")
        assert len(shell.catalog) == 5
        assert "Book added successfully!" in console.output
        assert "5. ID: X-1, Title: Test, Publisher: Pub, Price: 5.00" in console.output

    def test_add_publication_with_exponent_price(self) -> None:
        shell, console = run_session("2", "X-2", "Big", "Pub", "1e30", "1", "0")
        assert shell.catalog.select(5).price == Decimal("50")
        assert "5. ID: X-2, Title: Big, Publisher: Pub, Price: 50.00" in console.output

    def test_add_periodical_with_superscript_periodicity(self) -> None:
        shell, console = run_session("3", "P-2", "Odd", "Pub", "8", "²", "1", "0")
        item = shell.catalog.select(5)
        assert item.periodicity is Periodicity.MONTHLY
        assert "5. ID: P-2, Title: Odd, Publisher: Pub, Price: 8.00, Periodicity: Monthly" in console.output

    def test_add_periodical(self) -> None:
        shell, _ = run_session("3", "P-1", "Weekly News", "Pub", "8", "1", "0")
        item = shell.catalog.select(5)
        assert isinstance(item, Periodical)
        assert item.periodicity is Periodicity.WEEKLY
        assert item.price == Decimal("8")

    def test_place_one_off_order(self) -> None:
        shell, console = run_session("4", "1", "3", "5", "0")
        assert len(shell.orders) == 1
        assert "Total price: €38.97" in console.text
        assert "Order #1 of " in console.text
        assert "Subscription" not in console.text

    def test_place_subscription_order(self) -> None:
        """De Volkskrant: 5 (после clamp) * 30 выпусков * 2 месяца"""
        shell, console = run_session("4", "4", "1", "y", "2", "5", "0")
        assert "Product: De Volkskrant" in console.text
        assert "Total price: €300.00" in console.text
        assert "Subscription for 2 months" in console.text
        assert len(shell.orders) == 1

    def test_periodical_declined_subscription(self) -> None:
        _, console = run_session("4", "3", "2", "n", "0")
        assert "Total price: €13.90" in console.text

    def test_invalid_subscription_length_is_one_off(self) -> None:
        _, console = run_session("4", "3", "2", "y", "zero", "5", "0")
        assert "Total price: €13.90" in console.text
        assert "Subscription" not in console.text

    def test_publication_not_asked_about_subscription(self) -> None:
        _, console = run_session("4", "2", "1", "0")
        assert not any("subscription" in prompt.lower() for prompt in console.prompts)

    def test_invalid_selection(self) -> None:
        shell, console = run_session("4", "99", "0")
        assert "Invalid selection." in console.output
        assert len(shell.orders) == 0

    def test_invalid_quantity(self) -> None:
        shell, console = run_session("4", "1", "-3", "0")
        assert "Invalid quantity." in console.output
        assert len(shell.orders) == 0

    def test_no_orders_yet(self) -> None:
        _, console = run_session("5", "0")
        assert "No orders have been placed yet." in console.output
