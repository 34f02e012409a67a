"""
Contract Validation Module

JSON Schema контракты для payload-ов каталога и заказов.
"""

from .registry import (
    DEFAULT_SCHEMA_DIR,
    Contract,
    ContractRegistry,
    check_payload,
    default_registry,
)

__all__ = [
    "DEFAULT_SCHEMA_DIR",
    "Contract",
    "ContractRegistry",
    "check_payload",
    "default_registry",
]
