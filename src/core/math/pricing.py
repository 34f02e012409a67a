"""
Pricing — Ценовая арифметика каталога и заказов

Модуль содержит единственный допустимый способ:
- привести входное значение цены к Decimal
- ограничить цену диапазоном [PRICE_MIN, PRICE_MAX]
- вычислить итоговую стоимость заказа (разовая покупка / подписка)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Цена товара всегда в диапазоне [PRICE_MIN, PRICE_MAX] после присваивания
2. Все вычисления в Decimal (без float-погрешностей)
3. Функции детерминированы и не имеют побочных эффектов
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Final

# =============================================================================
# ЦЕНОВЫЕ ГРАНИЦЫ
# =============================================================================

# Минимальная цена товара в каталоге
PRICE_MIN: Final[Decimal] = Decimal("5")

# Максимальная цена товара в каталоге
PRICE_MAX: Final[Decimal] = Decimal("50")


# =============================================================================
# ПОЛИТИКА ПОДПИСКИ
# =============================================================================


class SubscriptionQuantityPolicy(str, Enum):
    """Учёт количества экземпляров при расчёте подписки"""

    IGNORE_QUANTITY = "ignore_quantity"  # price * issues * months
    MULTIPLY_BY_QUANTITY = "multiply_by_quantity"  # price * issues * months * quantity


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Приведение числового значения к Decimal.

    float конвертируется через str(), чтобы 12.99 оставалось 12.99,
    а не 12.9900000000000002131628...

    Args:
        value: Числовое значение (Decimal, int, float или строка с числом)

    Returns:
        Значение как Decimal

    Raises:
        ValueError: Если значение не является конечным числом
    """
    if isinstance(value, bool):
        raise ValueError(f"price must be numeric, got bool {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"price must be numeric, got {value!r}")

    if not result.is_finite():
        raise ValueError(f"price must be finite, got {value!r}")

    return result


def clamp_price(
    value: Decimal | int | float | str,
    min_value: Decimal = PRICE_MIN,
    max_value: Decimal = PRICE_MAX,
) -> Decimal:
    """
    Ограничение цены диапазоном [min_value, max_value].

    Тотальная функция для любого конечного числа: значения вне диапазона
    молча заменяются ближайшей границей.

    Args:
        value: Исходная цена
        min_value: Нижняя граница (default: PRICE_MIN)
        max_value: Верхняя граница (default: PRICE_MAX)

    Returns:
        Цена в диапазоне [min_value, max_value]

    Examples:
        >>> clamp_price(3)
        Decimal('5')
        >>> clamp_price(75)
        Decimal('50')
        >>> clamp_price("20")
        Decimal('20')
    """
    price = to_decimal(value)

    if price < min_value:
        return min_value

    if price > max_value:
        return max_value

    # 1E+1 → 10: внутри диапазона квантование не выходит за точность контекста
    if price.as_tuple().exponent > 0:
        price = price.quantize(Decimal(1))

    return price


def format_price(value: Decimal) -> str:
    """Цена с двумя десятичными знаками (например, '12.99'), без экспоненты"""
    return format(value, ".2f")


def format_amount(value: Decimal) -> str:
    """Сумма в позиционной записи без экспоненты (1.299E+31 → '12990000000000000000000000000000')"""
    return format(value, "f")


# =============================================================================
# ИТОГОВАЯ СТОИМОСТЬ
# =============================================================================


def compute_total_price(
    unit_price: Decimal,
    quantity: int,
    issues_per_month: int | None = None,
    subscription_months: int | None = None,
    policy: SubscriptionQuantityPolicy = SubscriptionQuantityPolicy.IGNORE_QUANTITY,
) -> Decimal:
    """
    Итоговая стоимость заказа.

    Разовая покупка: unit_price * quantity
    Подписка (issues_per_month и subscription_months заданы):
        unit_price * issues_per_month * subscription_months
        (* quantity при MULTIPLY_BY_QUANTITY)

    issues_per_month передаётся только для периодических изданий,
    поэтому для обычной публикации subscription_months игнорируется.

    Args:
        unit_price: Цена одного экземпляра
        quantity: Количество экземпляров
        issues_per_month: Выпусков в месяц (None для не-периодики)
        subscription_months: Длительность подписки в месяцах (None для разовой покупки)
        policy: Учёт quantity в ветке подписки

    Returns:
        Итоговая стоимость
    """
    base_price = unit_price * quantity

    if issues_per_month is None or subscription_months is None:
        return base_price

    total = unit_price * issues_per_month * subscription_months

    if policy is SubscriptionQuantityPolicy.MULTIPLY_BY_QUANTITY:
        total = total * quantity

    return total
