"""
Contracts — JSON Schema контракты payload-ов каталога и заказов

Каждая модель, отдающая JSON-представление (to_payload), проверяет его
против своего контракта перед возвратом. Схемы лежат в contracts/schema/
в корне проекта, читаются при первом обращении и проходят meta-validation.

Контракты:
- catalog_item: Publication / Periodical
- order_confirmation: OrderConfirmation
- order_placed_event: OrderPlacedEvent
"""

import json
import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

# contracts/ → core/ → src/ → корень проекта
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


class Contract(str, Enum):
    """Имя контракта = имя файла схемы без расширения"""

    CATALOG_ITEM = "catalog_item"
    ORDER_CONFIRMATION = "order_confirmation"
    ORDER_PLACED_EVENT = "order_placed_event"


class ContractRegistry:
    """
    Реестр валидаторов контрактов.

    Один Draft202012Validator на контракт, создаётся лениво и кэшируется.
    Принимает как Contract, так и произвольное имя схемы из schema_dir.
    """

    def __init__(self, schema_dir: Path = DEFAULT_SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self.schema_dir = schema_dir
        self._validators: dict[str, Draft202012Validator] = {}

    def validator(self, contract: Contract | str) -> Draft202012Validator:
        name = contract.value if isinstance(contract, Contract) else contract
        validator = self._validators.get(name)
        if validator is None:
            validator = Draft202012Validator(self._load(name))
            self._validators[name] = validator
        return validator

    def _load(self, name: str) -> dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является корректной JSON Schema
        """
        path = self.schema_dir / f"{name}.json"
        if not path.exists():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        logger.debug("Contract %s loaded from %s", name, path)
        return schema

    def check(self, contract: Contract | str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Проверка payload и возврат его же без изменений.

        Raises:
            jsonschema.ValidationError: Первое найденное нарушение контракта
        """
        self.validator(contract).validate(payload)
        return payload

    def violations(self, contract: Contract | str, payload: dict[str, Any]) -> list[str]:
        """Все нарушения в виде '<json path>: <message>', отсортированные по пути"""
        errors = sorted(self.validator(contract).iter_errors(payload), key=lambda e: e.json_path)
        return [f"{error.json_path}: {error.message}" for error in errors]


@lru_cache(maxsize=None)
def default_registry() -> ContractRegistry:
    return ContractRegistry()


def check_payload(contract: Contract, payload: dict[str, Any]) -> dict[str, Any]:
    """check() через реестр по умолчанию (schema_dir = DEFAULT_SCHEMA_DIR)"""
    return default_registry().check(contract, payload)
