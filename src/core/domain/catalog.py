"""
Catalog — Модели товаров каталога

Закрытый sum type из двух вариантов:
- Publication: разовая публикация (книга)
- Periodical: периодическое издание с периодичностью выхода

Варианты различаются полем-дискриминатором kind. Цена ограничивается
диапазоном [PRICE_MIN, PRICE_MAX] при создании и при каждом присваивании.
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Final, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, field_serializer, field_validator

from src.core.contracts import Contract, check_payload
from src.core.math.pricing import PRICE_MIN, clamp_price, format_amount, format_price, to_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Periodicity(str, Enum):
    """Периодичность выхода издания"""

    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


# Выпусков в месяц для каждой периодичности
ISSUES_PER_MONTH: Final[dict[Periodicity, int]] = {
    Periodicity.DAILY: 30,
    Periodicity.WEEKLY: 4,
    Periodicity.MONTHLY: 1,
}

# Значение для нераспознанной периодичности
ISSUES_PER_MONTH_FALLBACK: Final[int] = 1


def issues_per_month(periodicity: Any) -> int:
    """
    Количество выпусков в месяц.

    Тотальная функция: DAILY → 30, WEEKLY → 4, MONTHLY → 1,
    любое другое значение → 1.

    Args:
        periodicity: Периодичность (Periodicity или произвольное значение)

    Returns:
        Выпусков в месяц
    """
    return ISSUES_PER_MONTH.get(periodicity, ISSUES_PER_MONTH_FALLBACK)


# =============================================================================
# CATALOG ITEM MODELS
# =============================================================================


class _CatalogItemBase(BaseModel):
    """
    Общие поля и операции всех товаров каталога.

    Модель изменяемая: validate_assignment=True гарантирует, что
    присваивание price проходит через тот же clamp, что и конструктор.
    """

    id: str = Field(..., description="Идентификатор товара (ISBN/ISSN), формат не проверяется")
    title: str = Field(..., description="Название товара")
    publisher: str = Field(..., description="Издатель")
    price: Decimal = Field(default=PRICE_MIN, description="Цена, всегда в [5, 50]")

    model_config = {"validate_assignment": True}

    @field_validator("price", mode="before")
    @classmethod
    def clamp_to_range(cls, v: Any) -> Decimal:
        """Цена вне [PRICE_MIN, PRICE_MAX] заменяется ближайшей границей"""
        raw = to_decimal(v)
        clamped = clamp_price(raw)
        if clamped != raw:
            logger.debug("Price %s clamped to %s", raw, clamped)
        return clamped

    def set_price(self, value: Decimal | int | float | str) -> None:
        """Установка цены с ограничением диапазоном (никогда не падает на числах)"""
        self.price = value

    def identifier(self) -> str:
        return self.id

    def display_name(self) -> str:
        return self.title

    def describe(self) -> str:
        """Однострочное описание товара"""
        return (
            f"ID: {self.id}, Title: {self.title}, "
            f"Publisher: {self.publisher}, Price: {format_price(self.price)}"
        )

    @field_serializer("price", when_used="json")
    def serialize_price(self, v: Decimal) -> str:
        return format_amount(v)

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-совместимое представление, проверенное по контракту catalog_item.

        Raises:
            jsonschema.ValidationError: Если payload нарушает контракт
        """
        return check_payload(Contract.CATALOG_ITEM, self.model_dump(mode="json"))


class Publication(_CatalogItemBase):
    """Разовая публикация (книга). Покупается только поштучно."""

    kind: Literal["publication"] = "publication"


class Periodical(_CatalogItemBase):
    """
    Периодическое издание.

    Дополнительно к полям публикации хранит периодичность выхода и
    поддерживает покупку по подписке.
    """

    kind: Literal["periodical"] = "periodical"
    periodicity: Periodicity = Field(
        default=Periodicity.MONTHLY, description="Периодичность выхода"
    )

    def issues_per_month(self) -> int:
        return issues_per_month(self.periodicity)

    def describe(self) -> str:
        return f"{super().describe()}, Periodicity: {self.periodicity.value}"


CatalogItem = Annotated[Union[Publication, Periodical], Field(discriminator="kind")]

CATALOG_ITEM_ADAPTER: TypeAdapter[Publication | Periodical] = TypeAdapter(CatalogItem)


def parse_catalog_item(data: dict[str, Any]) -> Publication | Periodical:
    """
    Создание товара нужного варианта из dict по полю kind.

    Raises:
        pydantic.ValidationError: Если kind неизвестен или поля некорректны
    """
    return CATALOG_ITEM_ADAPTER.validate_python(data)


def is_periodical(item: Publication | Periodical) -> bool:
    return subscription_issue_rate(item) is not None


def subscription_issue_rate(item: Publication | Periodical) -> int | None:
    """
    Выпусков в месяц для расчёта подписки или None, если вариант товара
    подписку не поддерживает.

    Raises:
        TypeError: Если item не является вариантом CatalogItem
    """
    match item:
        case Periodical():
            return item.issues_per_month()
        case Publication():
            return None
        case _:
            raise TypeError(f"Unsupported catalog item: {type(item).__name__}")
