"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора снапшотов SciValue:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений enum/additionalProperties
- Интеграция с моделью SciValue
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.scinum import SciValue
from src.scinum.contracts import (
    SchemaLoader,
    SciValueValidator,
    validate_sci_value,
)
from src.scinum.math.exceptions import ConversionError
from src.scinum.math.int_domains import I32, U128


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_sci_value():
    """Валидный снапшот sci_value для тестирования."""
    return {
        "base": 21005,
        "exponent": 2,
        "base_domain": "i64",
        "exponent_domain": "i64",
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_sci_value_schema():
    """Проверка загрузки схемы."""
    loader = SchemaLoader()

    schema = loader.load_schema("sci_value")

    assert schema["title"] == "SciValue"
    assert set(schema["required"]) == {"base", "exponent", "base_domain", "exponent_domain"}


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("sci_value")
    schema2 = loader.load_schema("sci_value")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_shipped_inside_package():
    """Схема лежит рядом с модулем валидаторов и устанавливается как package data."""
    import src.scinum.contracts.validators as validators_module

    schema_path = Path(validators_module.__file__).parent / "schema" / "sci_value.json"

    assert schema_path.is_file()
    assert SchemaLoader(schema_dir=schema_path.parent).load_schema("sci_value") == (
        SchemaLoader().load_schema("sci_value")
    )


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    """Проверка ошибки при отсутствующей директории схем."""
    with pytest.raises(RuntimeError, match="Schema directory not found"):
        SchemaLoader(schema_dir=tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Невалидная JSON Schema отклоняется при загрузке."""
    (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
    loader = SchemaLoader(schema_dir=tmp_path)

    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        loader.load_schema("broken")


# =============================================================================
# TESTS - SCI VALUE VALIDATION
# =============================================================================


def test_sci_value_validator_accepts_valid_data(valid_sci_value):
    """Валидация правильного sci_value."""
    validator = SciValueValidator()
    validator.validate(valid_sci_value)  # Не должно выбросить исключение
    assert validator.is_valid(valid_sci_value)


def test_sci_value_validate_function(valid_sci_value):
    """Проверка функции validate_sci_value."""
    validate_sci_value(valid_sci_value)  # Не должно выбросить исключение


def test_sci_value_rejects_missing_required_field(valid_sci_value):
    """Валидация отклоняет данные без обязательных полей."""
    validator = SciValueValidator()

    data = valid_sci_value.copy()
    del data["exponent"]

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "'exponent' is a required property" in str(exc_info.value)


def test_sci_value_rejects_wrong_type(valid_sci_value):
    """Валидация отклоняет неправильный тип данных."""
    validator = SciValueValidator()

    data = valid_sci_value.copy()
    data["base"] = "21005"

    with pytest.raises(ValidationError) as exc_info:
        validator.validate(data)
    assert "is not of type 'integer'" in str(exc_info.value)


def test_sci_value_rejects_bool_base(valid_sci_value):
    """bool не является integer для JSON Schema."""
    data = valid_sci_value.copy()
    data["base"] = True

    with pytest.raises(ValidationError):
        validate_sci_value(data)


def test_sci_value_rejects_unknown_domain(valid_sci_value):
    """Валидация отклоняет неизвестный домен."""
    data = valid_sci_value.copy()
    data["base_domain"] = "i7"

    with pytest.raises(ValidationError):
        validate_sci_value(data)


def test_sci_value_rejects_unsigned_exponent_domain(valid_sci_value):
    """Домен экспоненты обязан быть знаковым."""
    data = valid_sci_value.copy()
    data["exponent_domain"] = "u64"

    with pytest.raises(ValidationError):
        validate_sci_value(data)


def test_sci_value_rejects_additional_properties(valid_sci_value):
    """Валидация отклоняет лишние поля."""
    data = valid_sci_value.copy()
    data["scale"] = 3

    with pytest.raises(ValidationError):
        validate_sci_value(data)


def test_sci_value_iter_errors_reports_all_problems():
    """iter_errors возвращает все нарушения сразу."""
    validator = SciValueValidator()

    errors = list(validator.iter_errors({"base": "x", "base_domain": "i7"}))

    # base type, base_domain enum, 2 missing required
    assert len(errors) == 4


# =============================================================================
# TESTS - MODEL INTEGRATION
# =============================================================================


def test_sci_value_model_generates_valid_json():
    """Проверка, что SciValue генерирует валидный снапшот."""
    value = SciValue.wrap_with_exponent(-21, 1, exponent_domain=I32)

    validate_sci_value(value.to_contract())
    assert value.to_contract()["exponent_domain"] == "i32"


def test_from_contract_validates_schema_first(valid_sci_value):
    """from_contract отклоняет данные, не прошедшие схему."""
    data = valid_sci_value.copy()
    del data["base_domain"]

    with pytest.raises(ValidationError):
        SciValue.from_contract(data)


def test_from_contract_checks_domain_bounds():
    """Схема не знает границ доменов: их проверяет модель."""
    data = {"base": 256, "exponent": 0, "base_domain": "u8", "exponent_domain": "i8"}
    validate_sci_value(data)  # схема пропускает

    with pytest.raises(ConversionError):
        SciValue.from_contract(data)


def test_from_contract_large_unsigned_base():
    """u128 base за пределами i64 проходит снапшот без потерь."""
    value = SciValue.wrap_with_exponent(2**100, -7, base_domain=U128)

    assert SciValue.from_contract(value.to_contract()) == value
