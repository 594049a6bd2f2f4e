"""
Patient Index — Модуль парсингу (parsing)

Компоненти:
- parse_line: розбиття рядка на поля з урахуванням лапок
- format_line: зворотна операція
- iter_logical_records / iter_records: склеювання фізичних рядків у логічні записи
- RecordBuilder: поля → Patient за мапінгом колонок

Приклад використання:
    from patient_index.parsing import parse_line, RecordBuilder

    fields = parse_line('P1,Alice,34,F,North,"Fever, cough"')
    result = RecordBuilder().build(fields)
    print(result.patient.symptoms)  # Fever, cough
"""

from .line_parser import (
    parse_line,
    format_line,
    has_open_quote,
    iter_records,
    iter_logical_records,
    LogicalRecord,
)

from .record_builder import (
    RecordBuilder,
    BuildResult,
    ParseWarning,
    WarningKind,
    parse_age,
)


__all__ = [
    'parse_line',
    'format_line',
    'has_open_quote',
    'iter_records',
    'iter_logical_records',
    'LogicalRecord',
    'RecordBuilder',
    'BuildResult',
    'ParseWarning',
    'WarningKind',
    'parse_age',
]
