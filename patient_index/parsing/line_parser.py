"""
Patient Index — Парсер рядків

Розбиває рядок з роздільниками на поля з урахуванням лапок:
- роздільник всередині лапок є частиною поля
- подвоєна лапка всередині лапок — це літерал "
- переноси рядка зберігаються тільки всередині лапок

Також містить зворотну операцію (format_line) та склеювання
фізичних рядків у логічні записи (iter_logical_records, iter_records).
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence


def parse_line(line: str, delimiter: str = ",", quote: str = '"') -> List[str]:
    """
    Розбити один логічний рядок на поля.

    Args:
        line: Рядок без завершального переносу
        delimiter: Роздільник полів
        quote: Символ лапок

    Returns:
        Список полів (обрізаних від пробілів). Завжди містить
        хоча б один елемент, навіть для порожнього рядка.

    Приклад:
        >>> parse_line('P1,"Smith, John",34')
        ['P1', 'Smith, John', '34']
        >>> parse_line('"a""b"')
        ['a"b']
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    length = len(line)
    while i < length:
        char = line[i]

        if char == quote:
            if in_quotes and i + 1 < length and line[i + 1] == quote:
                current.append(quote)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        elif char in "\r\n":
            if in_quotes:
                current.append(char)
        else:
            current.append(char)

        i += 1

    fields.append("".join(current).strip())
    return fields


def _scan_quotes(text: str, quote: str, in_quotes: bool = False) -> bool:
    """Стан лапок після тексту, починаючи зі стану in_quotes"""
    i = 0
    length = len(text)
    while i < length:
        if text[i] == quote:
            if in_quotes and i + 1 < length and text[i + 1] == quote:
                i += 1
            else:
                in_quotes = not in_quotes
        i += 1
    return in_quotes


def has_open_quote(text: str, quote: str = '"') -> bool:
    """
    Чи закінчується текст всередині поля в лапках.

    Використовує те саме правило подвоєних лапок, що й parse_line.
    """
    return _scan_quotes(text, quote)


def _needs_quoting(value: str, delimiter: str, quote: str) -> bool:
    return any(char in value for char in (delimiter, quote, "\n", "\r"))


def format_line(fields: Sequence[str], delimiter: str = ",", quote: str = '"') -> str:
    """
    Зібрати рядок з полів (обернена до parse_line операція).

    Поля з роздільником, лапками або переносами беруться в лапки,
    внутрішні лапки подвоюються. parse_line обрізає пробіли навіть
    у лапках, тому крайові пробіли полів не зберігаються.

    Приклад:
        >>> format_line(["P1", "Smith, John", 'a "b" c'])
        'P1,"Smith, John","a ""b"" c"'
    """
    parts = []
    for value in fields:
        value = "" if value is None else str(value)
        if _needs_quoting(value, delimiter, quote):
            escaped = value.replace(quote, quote + quote)
            parts.append(f"{quote}{escaped}{quote}")
        else:
            parts.append(value)
    return delimiter.join(parts)


@dataclass(frozen=True)
class LogicalRecord:
    """
    Логічний запис і його положення у вхідному потоці.

    line_count > 1 — запис склеєно з кількох фізичних рядків.
    unterminated — у цьому рядку відкрито лапки, які не закрились
    до кінця потоку.
    """
    text: str
    line_number: int
    line_count: int = 1
    unterminated: bool = False

    @property
    def last_line(self) -> int:
        return self.line_number + self.line_count - 1


def iter_logical_records(
    lines: Iterable[str],
    quote: str = '"',
    join_multiline: bool = True,
    first_line: int = 1,
) -> Iterator[LogicalRecord]:
    """
    Логічні записи з номерами рядків.

    Args:
        lines: Ітерований потік рядків (наприклад, відкритий файл)
        quote: Символ лапок
        join_multiline: Склеювати рядки через "\\n", поки лапки відкриті.
            Якщо False, кожен фізичний рядок — окремий запис.
        first_line: Номер першого рядка в lines

    Yields:
        LogicalRecord без завершального переносу рядка. Якщо лапки
        не закрились до кінця потоку, відкладені рядки віддаються
        поодинці, а перший з них позначається unterminated.
    """
    pending: List[str] = []
    in_quotes = False
    start = first_line
    number = first_line - 1

    for raw in lines:
        number += 1
        line = raw.rstrip("\r\n")

        if not join_multiline:
            yield LogicalRecord(text=line, line_number=number)
            continue

        if not pending:
            start = number
        pending.append(line)

        # Стан переноситься між рядками: сусідні лапки розділені "\n"
        in_quotes = _scan_quotes(line, quote, in_quotes)
        if in_quotes:
            continue

        yield LogicalRecord(text="\n".join(pending), line_number=start, line_count=len(pending))
        pending = []

    for offset, line in enumerate(pending):
        yield LogicalRecord(text=line, line_number=start + offset, unterminated=offset == 0)


def iter_records(
    lines: Iterable[str],
    quote: str = '"',
    join_multiline: bool = True,
) -> Iterator[str]:
    """Тексти логічних записів (див. iter_logical_records)"""
    for record in iter_logical_records(lines, quote=quote, join_multiline=join_multiline):
        yield record.text
