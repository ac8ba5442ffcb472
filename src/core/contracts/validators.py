"""
JSON Schema Contract Validators

Модуль для валидации JSON payload продаж согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки соответствия.

Схемы (src/core/contracts/schema/):
- sale.json         (Sale | SaleWithTax, различаются полем kind)
- channel_sale.json (ChannelSale)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'sale')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SaleValidator(ContractValidator):
    """Валидатор для sale контракта (Sale | SaleWithTax)."""

    def __init__(self):
        super().__init__("sale")


class ChannelSaleValidator(ContractValidator):
    """Валидатор для channel_sale контракта."""

    def __init__(self):
        super().__init__("channel_sale")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def _sale_validator() -> SaleValidator:
    return SaleValidator()


@lru_cache(maxsize=None)
def _channel_sale_validator() -> ChannelSaleValidator:
    return ChannelSaleValidator()


def validate_sale(data: Dict[str, Any]) -> None:
    """
    Валидация payload продажи (Sale или SaleWithTax).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _sale_validator().validate(data)


def validate_channel_sale(data: Dict[str, Any]) -> None:
    """
    Валидация payload продажи с каналом.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _channel_sale_validator().validate(data)
