"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями (model_dump)
"""

import json
from importlib.resources import files

import pytest
from jsonschema import ValidationError

from gpstime.core.contracts import (
    CalendarEpochValidator,
    ContractValidator,
    LeapSecondTableValidator,
    SchemaLoader,
    TimeValueValidator,
    leap_second_table_document,
    validate_calendar_epoch,
    validate_leap_second_table,
    validate_time_value,
)
from gpstime.core.domain import LEAP_SECONDS, CalendarEpoch, TimeValue
from gpstime.core.math.calendar import time_to_epoch
from gpstime.core.math.gps import gpst_to_time


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_all_schemas_load(self) -> None:
        """Все поставляемые схемы валидны (meta-validation)"""
        loader = SchemaLoader()
        for name in ("time_value", "calendar_epoch", "leap_second_table"):
            schema = loader.load_schema(name)
            assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("time_value") is loader.load_schema("time_value")

    def test_missing_schema(self) -> None:
        """Отсутствующая схема: FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        """Отсутствующий каталог схем: RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema(self, tmp_path) -> None:
        """Невалидная JSON Schema: ValueError"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_available(self) -> None:
        """Перечень схем, поставляемых с пакетом"""
        assert SchemaLoader().available() == ["calendar_epoch", "leap_second_table", "time_value"]

    def test_package_resources_root(self) -> None:
        """Корень по умолчанию: ресурсы пакета gpstime.core.contracts"""
        root = files("gpstime.core.contracts").joinpath("schema")
        assert SchemaLoader(root).load_schema("time_value") == SchemaLoader().load_schema("time_value")

    def test_custom_root(self, tmp_path) -> None:
        """Произвольный каталог тоже подходит как корень"""
        schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}
        (tmp_path / "custom.json").write_text(json.dumps(schema), encoding="utf-8")
        (tmp_path / "notes.txt").write_text("not a schema", encoding="utf-8")
        loader = SchemaLoader(tmp_path)
        assert loader.available() == ["custom"]
        assert loader.load_schema("custom") == schema


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class TestContractValidator:
    """Тесты базового ContractValidator"""

    def test_schema_name_per_subclass(self) -> None:
        """Каждый валидатор привязан к своей схеме"""
        assert TimeValueValidator.schema_name == "time_value"
        assert CalendarEpochValidator.schema_name == "calendar_epoch"
        assert LeapSecondTableValidator.schema_name == "leap_second_table"
        assert TimeValueValidator().schema["title"] == "TimeValue"

    def test_custom_loader(self, tmp_path) -> None:
        """Подкласс со своей схемой и своим загрузчиком"""
        schema = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "type": "object",
            "required": ["week"],
            "properties": {"week": {"type": "integer", "minimum": 0}},
        }
        (tmp_path / "gps_week.json").write_text(json.dumps(schema), encoding="utf-8")

        class GpsWeekValidator(ContractValidator):
            schema_name = "gps_week"

        validator = GpsWeekValidator(SchemaLoader(tmp_path))
        assert validator.is_valid({"week": 2190})
        assert not validator.is_valid({"week": -1})

    def test_describe_errors(self) -> None:
        """Нарушения описываются путём и сообщением"""
        data = CalendarEpoch(year=2100, month=13, day=1).model_dump()
        described = CalendarEpochValidator().describe_errors(data)
        assert len(described) == 2
        assert described[0].startswith("$['month']: ")
        assert described[1].startswith("$['year']: ")

    def test_describe_errors_root(self) -> None:
        """Нарушение на уровне документа обозначается $"""
        described = TimeValueValidator().describe_errors({"whole_seconds": 0})
        assert described == ["$: 'fraction' is a required property"]

    def test_describe_errors_valid(self) -> None:
        """Для валидных данных список пуст"""
        assert TimeValueValidator().describe_errors(TimeValue(whole_seconds=0).model_dump()) == []


# =============================================================================
# TIME VALUE CONTRACT
# =============================================================================


class TestTimeValueContract:
    """Тесты контракта time_value"""

    def test_model_dump_valid(self) -> None:
        """model_dump TimeValue соответствует контракту"""
        validate_time_value(gpst_to_time(2190, 259218.5).model_dump())

    def test_missing_required(self) -> None:
        """Отсутствие fraction: нарушение"""
        with pytest.raises(ValidationError, match="'fraction' is a required property"):
            validate_time_value({"whole_seconds": 0})

    def test_wrong_type(self) -> None:
        """whole_seconds должен быть целым"""
        with pytest.raises(ValidationError):
            validate_time_value({"whole_seconds": 1.5, "fraction": 0.0})

    def test_additional_properties(self) -> None:
        """Лишние поля запрещены"""
        assert not TimeValueValidator().is_valid(
            {"whole_seconds": 0, "fraction": 0.0, "scale": "gps"}
        )


# =============================================================================
# CALENDAR EPOCH CONTRACT
# =============================================================================


class TestCalendarEpochContract:
    """Тесты контракта calendar_epoch"""

    def test_model_dump_valid(self) -> None:
        """model_dump CalendarEpoch соответствует контракту"""
        epoch = time_to_epoch(TimeValue(whole_seconds=1640995200, fraction=0.5))
        validate_calendar_epoch(epoch.model_dump())

    def test_year_out_of_range(self) -> None:
        """Год вне 1970–2099 нарушает контракт"""
        with pytest.raises(ValidationError):
            validate_calendar_epoch(CalendarEpoch(year=1969, month=1, day=1).model_dump())

    def test_iter_errors(self) -> None:
        """Все нарушения перечисляются"""
        data = CalendarEpoch(year=2100, month=13, day=1).model_dump()
        errors = list(CalendarEpochValidator().iter_errors(data))
        assert len(errors) == 2


# =============================================================================
# LEAP SECOND TABLE CONTRACT
# =============================================================================


class TestLeapSecondTableContract:
    """Тесты контракта leap_second_table"""

    def test_builtin_table_valid(self) -> None:
        """Встроенная таблица соответствует контракту"""
        validate_leap_second_table(leap_second_table_document())

    def test_document_order(self) -> None:
        """Документ сохраняет порядок таблицы"""
        document = leap_second_table_document()
        assert document["schema_version"] == "1"
        assert len(document["entries"]) == len(LEAP_SECONDS)
        assert document["entries"][0]["utc_minus_gps"] == -18
        assert document["entries"][-1]["year"] == 1981

    def test_document_is_json_serializable(self) -> None:
        """Документ сериализуется в JSON"""
        document = leap_second_table_document()
        assert json.loads(json.dumps(document)) == document

    def test_positive_offset_rejected(self) -> None:
        """Положительная UTC - GPS нарушает контракт"""
        document = leap_second_table_document()
        document["entries"][0]["utc_minus_gps"] = 18
        assert not LeapSecondTableValidator().is_valid(document)

    def test_empty_table_rejected(self) -> None:
        """Пустая таблица нарушает контракт"""
        with pytest.raises(ValidationError):
            validate_leap_second_table({"schema_version": "1", "entries": []})
