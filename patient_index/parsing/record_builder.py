"""
Patient Index — Побудова записів

Перетворює список полів на Patient за позиційним мапінгом колонок.

Відновлювані ситуації не логуються тут, а повертаються як
структуровані попередження (ParseWarning). Рішення, як їх показати,
приймає викликаючий код (pipeline).
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from patient_index.config.settings import ColumnMapping
from patient_index.errors import ConfigError
from patient_index.schemas.patient import Patient


_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class WarningKind(str, Enum):
    """Тип відновленої проблеми"""
    MALFORMED_ROW = "malformed_row"
    INVALID_NUMBER = "invalid_number"
    MULTILINE_RECORD = "multiline_record"
    UNTERMINATED_QUOTE = "unterminated_quote"


@dataclass(frozen=True)
class ParseWarning:
    """Опис відновленої проблеми парсингу"""
    kind: WarningKind
    message: str
    line_number: Optional[int] = None
    field: Optional[str] = None
    value: Optional[str] = None

    def __str__(self) -> str:
        location = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"{location}{self.message}"


@dataclass(frozen=True)
class BuildResult:
    """
    Результат побудови запису.

    patient дорівнює None, якщо рядок зіпсований і має бути пропущений.
    """
    patient: Optional[Patient]
    warnings: Tuple[ParseWarning, ...] = field(default_factory=tuple)

    @property
    def skipped(self) -> bool:
        return self.patient is None


def parse_age(raw: str) -> Tuple[int, bool]:
    """
    Розібрати вік.

    Returns:
        (значення, чи вдалося). Порожній рядок дає (0, True):
        відсутнє значення не є помилкою.
    """
    value = raw.strip()
    if not value:
        return 0, True
    if not _INTEGER_PATTERN.fullmatch(value):
        return 0, False
    return int(value), True


class RecordBuilder:
    """
    Будівник записів пацієнтів.

    Приклад використання:
        builder = RecordBuilder(ColumnMapping.default())
        result = builder.build(["P1", "Alice", "34", "F", "North", "Fever"])
        result.patient.age  # 34
    """

    def __init__(self, columns: Optional[ColumnMapping] = None, min_fields: int = 1):
        """
        Args:
            columns: Мапінг поле → індекс колонки. None — компактна схема.
            min_fields: Мінімальна кількість полів у рядку
        """
        if min_fields < 1:
            raise ConfigError(f"min_fields must be at least 1, got {min_fields}")

        self.columns = columns if columns is not None else ColumnMapping.default()
        self.min_fields = min_fields
        self._index_by_field: Dict[str, int] = self.columns.as_dict()

    def build(self, fields: Sequence[str], line_number: Optional[int] = None) -> BuildResult:
        """Побудувати Patient з полів рядка"""
        if len(fields) < self.min_fields:
            warning = ParseWarning(
                kind=WarningKind.MALFORMED_ROW,
                message=f"row has {len(fields)} field(s), at least {self.min_fields} required",
                line_number=line_number,
            )
            return BuildResult(patient=None, warnings=(warning,))

        values = {}
        warnings = []

        for name, index in self._index_by_field.items():
            if index >= len(fields):
                continue
            raw = fields[index].strip()

            if name == "age":
                age, ok = parse_age(raw)
                if not ok:
                    warnings.append(ParseWarning(
                        kind=WarningKind.INVALID_NUMBER,
                        message=f"age {raw!r} is not a number, using 0",
                        line_number=line_number,
                        field=name,
                        value=raw,
                    ))
                values[name] = age
            else:
                values[name] = raw

        return BuildResult(patient=Patient(**values), warnings=tuple(warnings))

    def __repr__(self) -> str:
        return f"RecordBuilder(columns={self._index_by_field}, min_fields={self.min_fields})"
