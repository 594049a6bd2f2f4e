"""
Тести для модуля parsing.record_builder

Запуск: pytest tests/test_record_builder.py -v
"""

from pathlib import Path

import pytest

from patient_index.config import ColumnMapping, load_config
from patient_index.errors import ConfigError
from patient_index.parsing import RecordBuilder, WarningKind, parse_age, parse_line

WIDE_SCHEMA = Path(__file__).parent.parent / "examples_config" / "wide_schema.yaml"


def test_build_default_mapping():
    """Компактна схема 0..5"""
    builder = RecordBuilder()
    result = builder.build(parse_line("P1,Alice,34,F,North,Fever and cough"))

    patient = result.patient
    assert patient.patient_id == "P1"
    assert patient.name == "Alice"
    assert patient.age == 34
    assert patient.gender == "F"
    assert patient.region == "North"
    assert patient.symptoms == "Fever and cough"
    assert result.warnings == ()
    print(f"✓ Patient: {patient}")


def test_malformed_age_recovers_with_warning():
    """Нечисловий вік → 0 і попередження"""
    builder = RecordBuilder()
    result = builder.build(parse_line("P3,Carl,notanumber,M,South,Headache"), line_number=4)

    assert result.patient is not None
    assert result.patient.age == 0
    assert len(result.warnings) == 1

    warning = result.warnings[0]
    assert warning.kind == WarningKind.INVALID_NUMBER
    assert warning.field == "age"
    assert warning.value == "notanumber"
    assert warning.line_number == 4
    assert "line 4" in str(warning)
    print(f"✓ Попередження: {warning}")


def test_short_row_keeps_zero_values():
    """Відсутні позиції лишаються порожніми"""
    result = RecordBuilder().build(["P9", "Ivy"])

    patient = result.patient
    assert patient.patient_id == "P9"
    assert patient.name == "Ivy"
    assert patient.age == 0
    assert patient.region == ""
    assert patient.symptoms == ""
    assert result.warnings == ()


def test_empty_symptoms_field():
    result = RecordBuilder().build(parse_line("P4,Dana,40,F,South,"))

    assert result.patient.symptoms == ""
    assert result.patient.has_symptoms is False


def test_wide_mapping():
    """Широка схема: симптоми в 8, регіон у 12"""
    row = ["P1", "Alice", "34", "F", "x", "x", "x", "x", "Cough", "x", "x", "x", "West"]
    mapping = load_config(str(WIDE_SCHEMA)).records.columns
    result = RecordBuilder(mapping).build(row)

    assert result.patient.symptoms == "Cough"
    assert result.patient.region == "West"
    print("✓ Широка схема працює")


def test_unmapped_fields_stay_empty():
    mapping = ColumnMapping.from_dict({"patient_id": 0, "symptoms": 1})
    result = RecordBuilder(mapping).build(["P1", "Rash", "ignored"])

    assert result.patient.patient_id == "P1"
    assert result.patient.symptoms == "Rash"
    assert result.patient.name == ""


def test_min_fields_skips_row():
    """Рядок з меншою кількістю полів пропускається"""
    builder = RecordBuilder(min_fields=3)
    result = builder.build(["P1", "Alice"], line_number=7)

    assert result.skipped
    assert result.patient is None
    assert result.warnings[0].kind == WarningKind.MALFORMED_ROW
    assert result.warnings[0].line_number == 7


def test_invalid_min_fields():
    with pytest.raises(ConfigError):
        RecordBuilder(min_fields=0)


@pytest.mark.parametrize("raw, expected", [
    ("34", (34, True)),
    (" 7 ", (7, True)),
    ("+5", (5, True)),
    ("-1", (-1, True)),
    ("", (0, True)),
    ("3.5", (0, False)),
    ("forty", (0, False)),
    ("1_000", (0, False)),
])
def test_parse_age(raw, expected):
    assert parse_age(raw) == expected
