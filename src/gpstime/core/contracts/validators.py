"""
JSON Schema Contract Validators

Валидация dict-представлений (model_dump) моделей gpstime против
JSON Schema контрактов для обмена с внешними системами.

Схемы поставляются как ресурсы пакета (gpstime.core.contracts/schema):
- time_value.json
- calendar_epoch.json
- leap_second_table.json
"""

import json
from importlib.resources import files
from importlib.resources.abc import Traversable
from typing import Any, ClassVar, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from gpstime.core.domain.leap_seconds import LEAP_SECONDS

LEAP_SECOND_TABLE_SCHEMA_VERSION = "1"

SCHEMA_SUFFIX = ".json"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из ресурсов пакета.

    По умолчанию читает schema/ внутри gpstime.core.contracts через
    importlib.resources, поэтому работает и из wheel, и из zip-импорта.
    Схема проходит meta-validation один раз и кэшируется вместе с
    готовым Draft202012Validator.
    """

    def __init__(self, root: Traversable | None = None):
        self._root = root if root is not None else files(__package__).joinpath("schema")
        if not self._root.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._root}")

        self._validators: Dict[str, Draft202012Validator] = {}

    def available(self) -> list[str]:
        """Имена поставляемых схем (без расширения), отсортированные."""
        return sorted(
            resource.name[: -len(SCHEMA_SUFFIX)]
            for resource in self._root.iterdir()
            if resource.is_file() and resource.name.endswith(SCHEMA_SUFFIX)
        )

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Если схема не найдена
            ValueError: Если файл не является валидной JSON Schema
        """
        return self.validator_for(schema_name).schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Готовый валидатор схемы (из кэша после первого обращения)."""
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached

        resource = self._root.joinpath(f"{schema_name}{SCHEMA_SUFFIX}")
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_name}{SCHEMA_SUFFIX}")

        schema = json.loads(resource.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}{SCHEMA_SUFFIX}: {e}") from e

        validator = Draft202012Validator(schema)
        self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта; подклассы задают schema_name.
    """

    schema_name: ClassVar[str]

    def __init__(self, loader: SchemaLoader | None = None):
        self.validator = (loader or _SCHEMA_LOADER).validator_for(self.schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> list[str]:
        """
        Нарушения в виде "путь: сообщение", упорядоченные по пути.

        Корень документа обозначается "$".
        """
        described = []
        for error in self.iter_errors(data):
            path = "$" + "".join(f"[{part!r}]" for part in error.absolute_path)
            described.append(f"{path}: {error.message}")
        return sorted(described)


class TimeValueValidator(ContractValidator):
    schema_name = "time_value"


class CalendarEpochValidator(ContractValidator):
    schema_name = "calendar_epoch"


class LeapSecondTableValidator(ContractValidator):
    schema_name = "leap_second_table"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_time_value(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют time_value.json
    """
    TimeValueValidator().validate(data)


def validate_calendar_epoch(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют calendar_epoch.json
    """
    CalendarEpochValidator().validate(data)


def validate_leap_second_table(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют leap_second_table.json
    """
    LeapSecondTableValidator().validate(data)


def leap_second_table_document() -> Dict[str, Any]:
    """
    Встроенная таблица leap seconds как документ контракта leap_second_table.

    Порядок записей сохраняется: от самой свежей к самой старой.
    """
    return {
        "schema_version": LEAP_SECOND_TABLE_SCHEMA_VERSION,
        "entries": [entry.model_dump() for entry in LEAP_SECONDS],
    }
