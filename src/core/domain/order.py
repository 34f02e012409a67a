"""
Order — Заказ товара каталога

Содержит:
- OrderIdSequence: потокобезопасный монотонный счётчик идентификаторов
- OrderConfirmation: immutable результат оформления заказа
- OrderPlacedEvent: immutable уведомление об оформленном заказе
- Order[ItemT]: заказ, параметризованный вариантом товара

Расчёт стоимости:
1. base_price = item.price * quantity
2. Periodical + subscription_months → item.price * issues_per_month * subscription_months
3. Иначе → base_price

Уведомления доставляются синхронно, в порядке регистрации, до возврата
из finalize(). Исключение наблюдателя пробрасывается вызывающему.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_serializer

from src.core.config import OrderingConfig
from src.core.contracts import Contract, check_payload
from src.core.domain.catalog import Periodical, Publication, subscription_issue_rate
from src.core.math.pricing import compute_total_price, format_amount

logger = logging.getLogger(__name__)


# =============================================================================
# ORDER ID SEQUENCE
# =============================================================================


class OrderIdSequence:
    """Монотонный счётчик идентификаторов заказов.

    next_id() выполняет read-and-increment под блокировкой, поэтому
    идентификаторы уникальны и строго возрастают даже при создании
    заказов из нескольких потоков.
    """

    def __init__(self, start: int = 0):
        """
        Args:
            start: последнее выданное значение (первый next_id() вернёт start + 1)
        """
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._last_id = start
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        """Последний выданный идентификатор (0, если ещё не выдавались)"""
        with self._lock:
            return self._last_id

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id


# Общий счётчик процесса: используется всеми Order без явного id_sequence
DEFAULT_ORDER_ID_SEQUENCE = OrderIdSequence()


# =============================================================================
# RESULT / EVENT
# =============================================================================


class OrderConfirmation(BaseModel):
    """Подтверждение заказа: (item_id, quantity, total_price)"""

    item_id: str = Field(..., description="Идентификатор заказанного товара")
    quantity: int = Field(..., gt=0, description="Количество экземпляров")
    total_price: Decimal = Field(..., ge=0, description="Итоговая стоимость")

    model_config = {"frozen": True}

    @field_serializer("total_price", when_used="json")
    def serialize_total_price(self, v: Decimal) -> str:
        return format_amount(v)

    def to_payload(self) -> dict[str, Any]:
        return check_payload(Contract.ORDER_CONFIRMATION, self.model_dump(mode="json"))


class OrderPlacedEvent(BaseModel):
    """Уведомление об оформленном заказе, передаётся наблюдателям"""

    order_id: int = Field(..., gt=0, description="Идентификатор заказа")
    item_display_name: str = Field(..., description="Название товара")
    quantity: int = Field(..., gt=0, description="Количество экземпляров")
    total_price: Decimal = Field(..., ge=0, description="Итоговая стоимость")

    model_config = {"frozen": True}

    @field_serializer("total_price", when_used="json")
    def serialize_total_price(self, v: Decimal) -> str:
        return format_amount(v)

    def to_payload(self) -> dict[str, Any]:
        return check_payload(Contract.ORDER_PLACED_EVENT, self.model_dump(mode="json"))


OrderPlacedObserver = Callable[[OrderPlacedEvent], None]

ItemT = TypeVar("ItemT", Publication, Periodical)


# =============================================================================
# ORDER
# =============================================================================


class Order(Generic[ItemT]):
    """Заказ одного товара каталога.

    Товар хранится по ссылке: изменения исходного товара (например, цены)
    после создания заказа видны через заказ.

    Поля заказа не меняются после создания; finalize() только вычисляет
    стоимость и рассылает уведомление.
    """

    def __init__(
        self,
        item: ItemT,
        quantity: int,
        subscription_months: int | None = None,
        *,
        id_sequence: OrderIdSequence | None = None,
        clock: Callable[[], datetime] | None = None,
        config: OrderingConfig | None = None,
    ):
        """
        Args:
            item: заказываемый товар
            quantity: количество экземпляров (> 0)
            subscription_months: длительность подписки в месяцах (> 0) или None
            id_sequence: источник идентификаторов (default: общий счётчик процесса)
            clock: источник времени создания (default: datetime.now)
            config: конфигурация расчёта (default: OrderingConfig())
        """
        if quantity <= 0:
            raise ValueError(f"quantity must be positive, got {quantity}")
        if subscription_months is not None and subscription_months <= 0:
            raise ValueError(
                f"subscription_months must be positive, got {subscription_months}"
            )

        self._id = (id_sequence or DEFAULT_ORDER_ID_SEQUENCE).next_id()
        self.item = item
        self.created_at = (clock or datetime.now)()
        self.quantity = quantity
        self.subscription_months = subscription_months
        self.config = config or OrderingConfig()

        self._observers: list[OrderPlacedObserver] = []

        logger.debug(
            "Order #%d created: item=%s quantity=%d subscription_months=%s",
            self._id,
            item.identifier(),
            quantity,
            subscription_months,
        )

    @classmethod
    def create(
        cls,
        item: ItemT,
        quantity: int,
        subscription_months: int | None = None,
        **kwargs: Any,
    ) -> "Order[ItemT]":
        return cls(item, quantity, subscription_months, **kwargs)

    @property
    def order_id(self) -> int:
        return self._id

    @property
    def is_subscription(self) -> bool:
        """True для периодики с заданной длительностью подписки"""
        return (
            subscription_issue_rate(self.item) is not None
            and self.subscription_months is not None
        )

    # -------------------------------------------------------------------------
    # Наблюдатели
    # -------------------------------------------------------------------------

    @property
    def observers(self) -> tuple[OrderPlacedObserver, ...]:
        return tuple(self._observers)

    def on_placed(self, observer: OrderPlacedObserver) -> OrderPlacedObserver:
        """Регистрация наблюдателя. Возвращает его же (можно как декоратор)."""
        self._observers.append(observer)
        return observer

    def remove_observer(self, observer: OrderPlacedObserver) -> None:
        """
        Удаление первой регистрации наблюдателя.

        Raises:
            ValueError: Если наблюдатель не зарегистрирован
        """
        self._observers.remove(observer)

    # -------------------------------------------------------------------------
    # Расчёт и оформление
    # -------------------------------------------------------------------------

    def total_price(self) -> Decimal:
        """Итоговая стоимость без рассылки уведомления"""
        return compute_total_price(
            unit_price=self.item.price,
            quantity=self.quantity,
            issues_per_month=subscription_issue_rate(self.item),
            subscription_months=self.subscription_months,
            policy=self.config.subscription_quantity_policy,
        )

    def finalize(self) -> OrderConfirmation:
        """
        Оформление заказа.

        Вычисляет стоимость, синхронно уведомляет всех наблюдателей в порядке
        регистрации и возвращает подтверждение.

        Returns:
            OrderConfirmation(item_id, quantity, total_price)
        """
        total = self.total_price()

        confirmation = OrderConfirmation(
            item_id=self.item.identifier(),
            quantity=self.quantity,
            total_price=total,
        )
        event = OrderPlacedEvent(
            order_id=self._id,
            item_display_name=self.item.display_name(),
            quantity=self.quantity,
            total_price=total,
        )

        logger.debug(
            "Order #%d finalized: total=%s, notifying %d observer(s)",
            self._id,
            total,
            len(self._observers),
        )

        # Снапшот: регистрация внутри обработчика не влияет на текущую рассылку
        for observer in tuple(self._observers):
            observer(event)

        return confirmation

    def describe(self) -> str:
        """Многострочное описание заказа"""
        lines = [
            f"Order #{self._id} of {self.created_at.strftime(self.config.date_format)}, "
            f"{self.quantity} copy(ies) of:",
            self.item.describe(),
        ]

        if self.is_subscription:
            lines.append(f"Subscription for {self.subscription_months} months")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"Order(order_id={self._id}, item_id={self.item.identifier()!r}, "
            f"quantity={self.quantity}, subscription_months={self.subscription_months})"
        )
