"""Разбор пользовательского ввода.

Функции никогда не бросают исключений на некорректном тексте: вместо
этого возвращается значение по умолчанию (цена, периодичность) или None
(целые числа), и решение принимает меню.
"""

from decimal import Decimal

from src.core.domain.catalog import Periodicity
from src.core.math.pricing import PRICE_MIN, to_decimal

DEFAULT_PERIODICITY = Periodicity.MONTHLY

YES_ANSWERS = frozenset({"Y", "YES", "J", "JA"})


def parse_price(text: str | None) -> Decimal:
    """Цена из текста; '12,99' и '12.99' эквивалентны. Некорректный ввод → PRICE_MIN."""
    if text is None:
        return PRICE_MIN
    try:
        return to_decimal(text.strip().replace(",", "."))
    except ValueError:
        return PRICE_MIN


def parse_periodicity(text: str | None) -> Periodicity:
    """
    Периодичность из текста.

    Принимает порядковый номер (0=Daily, 1=Weekly, 2=Monthly) или имя
    в любом регистре. Всё остальное → Monthly.
    """
    if text is None:
        return DEFAULT_PERIODICITY

    value = text.strip()
    members = list(Periodicity)

    # только десятичные цифры; '²' и '①' сюда не попадают
    if value.isdecimal():
        try:
            index = int(value)
        except ValueError:
            return DEFAULT_PERIODICITY
        return members[index] if index < len(members) else DEFAULT_PERIODICITY

    for member in members:
        if value.lower() in (member.name.lower(), member.value.lower()):
            return member

    return DEFAULT_PERIODICITY


def parse_positive_int(text: str | None) -> int | None:
    """Положительное целое или None"""
    if text is None:
        return None
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def parse_yes(text: str | None) -> bool:
    return text is not None and text.strip().upper() in YES_ANSWERS
