"""
Тести для модуля parsing.line_parser

Запуск: pytest tests/test_line_parser.py -v
Або демо: python tests/test_line_parser.py
"""

import doctest

import pytest

from patient_index.parsing import (
    parse_line,
    format_line,
    has_open_quote,
    iter_records,
    iter_logical_records,
)
from patient_index.parsing import line_parser


def test_simple_line():
    """Тест простого рядка без лапок"""
    fields = parse_line("P1,Alice,34,F,North,Fever")

    assert fields == ["P1", "Alice", "34", "F", "North", "Fever"]
    print(f"✓ Поля: {fields}")


def test_empty_line_gives_one_field():
    """Порожній рядок — один порожній елемент"""
    assert parse_line("") == [""]
    assert parse_line(",,") == ["", "", ""]
    print("✓ Порожні поля збережено")


def test_fields_are_trimmed():
    assert parse_line("  P1 ,  Alice  ,34 ") == ["P1", "Alice", "34"]


def test_quoted_delimiter():
    """Роздільник у лапках не розбиває поле"""
    fields = parse_line('P2,Bob,29,M,North,"cough, fever"')

    assert len(fields) == 6
    assert fields[5] == "cough, fever"
    print(f"✓ Симптоми в лапках: {fields[5]!r}")


def test_escaped_quote():
    """Подвоєна лапка всередині лапок — літерал"""
    assert parse_line('"a""b"') == ['a"b']
    assert parse_line('x,"say ""hi""",y') == ["x", 'say "hi"', "y"]
    print('✓ "a""b" → a"b')


def test_line_breaks_outside_quotes_dropped():
    assert parse_line("a,b\r") == ["a", "b"]
    assert parse_line("a\n,b") == ["a", "b"]


def test_line_breaks_inside_quotes_kept():
    fields = parse_line('"first\nsecond",z')

    assert fields == ["first\nsecond", "z"]
    print("✓ Перенос у лапках збережено")


def test_custom_delimiter():
    assert parse_line('a;"b;c";d', delimiter=";") == ["a", "b;c", "d"]


@pytest.mark.parametrize("line, delimiters", [
    ("a", 0),
    ("a,b", 1),
    (",,,", 3),
    ('"x,y",z', 1),
    ('"a,""b"",c",d,e', 2),
    ("P1,Alice,34,F,North,Fever and cough", 5),
])
def test_field_count_is_delimiters_plus_one(line, delimiters):
    assert len(parse_line(line)) == delimiters + 1


@pytest.mark.parametrize("fields", [
    ["P1", "Alice", "34", "F", "North", "Fever and cough"],
    ["", "", ""],
    ["only"],
    ["Smith, John", 'say "hi"', "two\nlines"],
])
def test_format_then_parse_roundtrip(fields):
    assert parse_line(format_line(fields)) == fields


def test_format_line_quotes_only_when_needed():
    line = format_line(["P1", "Smith, John", 'say "hi"'])

    assert line == 'P1,"Smith, John","say ""hi"""'
    print(f"✓ {line}")


def test_has_open_quote():
    assert has_open_quote('a,"b') is True
    assert has_open_quote('"a""b"') is False
    assert has_open_quote('"a""') is True
    assert has_open_quote("plain") is False


def test_iter_records_joins_open_quotes():
    """Фізичні рядки склеюються, поки лапки відкриті"""
    lines = ['P5,"Sore throat\n', 'and fever",x\n', "P6,y\n"]

    records = list(iter_records(lines))

    assert records == ['P5,"Sore throat\nand fever",x', "P6,y"]
    assert parse_line(records[0])[1] == "Sore throat\nand fever"
    print(f"✓ Записів: {len(records)}")


def test_iter_records_line_by_line():
    lines = ['P5,"Sore throat\n', 'and fever",x\n']

    records = list(iter_records(lines, join_multiline=False))

    assert records == ['P5,"Sore throat', 'and fever",x']


def test_iter_records_unterminated_quote_at_end():
    """Незакриті лапки не поглинають решту файлу"""
    records = list(iter_records(['"abc\n', "def"]))

    assert records == ['"abc', "def"]
    assert parse_line(records[0]) == ["abc"]


def test_logical_records_line_numbers():
    lines = ["P1,a\n", 'P5,"Sore throat\n', "and\n", 'fever",x\n', "P6,y\n"]

    records = list(iter_logical_records(lines, first_line=2))

    assert [(r.line_number, r.line_count) for r in records] == [(2, 1), (3, 3), (6, 1)]
    assert records[1].last_line == 5
    assert not any(r.unterminated for r in records)
    print(f"✓ Рядки записів: {[r.line_number for r in records]}")


def test_logical_records_stray_quote():
    """Одиночна лапка позначається, наступні рядки лишаються окремими"""
    lines = ['P1,Alice,34,F,North,5" rash\n', "P2,Bob,30,M,South,Cough\n", "P3,Cid,40,M,East,Fever\n"]

    records = list(iter_logical_records(lines))

    assert [r.text for r in records] == [line.rstrip("\n") for line in lines]
    assert [r.unterminated for r in records] == [True, False, False]
    assert [r.line_number for r in records] == [1, 2, 3]
    assert all(r.line_count == 1 for r in records)


def test_logical_records_quote_state_carries_between_lines():
    """Подвоєна лапка не склеюється через межу рядка"""
    records = list(iter_logical_records(['"a"\n', '"b",c\n']))

    assert [r.text for r in records] == ['"a"', '"b",c']

    records = list(iter_logical_records(['"a""\n', 'b",c\n']))

    assert [r.text for r in records] == ['"a""\nb",c']
    assert parse_line(records[0].text) == ['a"\nb', "c"]


def test_logical_records_many_continuation_lines():
    lines = ['P1,"start\n'] + ["more\n"] * 2000 + ['end",x\n', "P2,y\n"]

    records = list(iter_logical_records(lines))

    assert len(records) == 2
    assert records[0].line_count == 2002
    assert records[1].line_number == 2003


def test_module_docstring_examples():
    """Приклади в документації модуля виконуються"""
    failed, attempted = doctest.testmod(line_parser)

    assert attempted > 0
    assert failed == 0


def test_iter_records_strips_crlf():
    assert list(iter_records(["a,b\r\n", "c\r\n"])) == ["a,b", "c"]


def demo():
    """Демонстрація парсера"""
    print("=" * 60)
    print("Patient Index — Демонстрація парсера рядків")
    print("=" * 60)

    test_simple_line()
    test_empty_line_gives_one_field()
    test_quoted_delimiter()
    test_escaped_quote()
    test_line_breaks_inside_quotes_kept()
    test_format_line_quotes_only_when_needed()
    test_iter_records_joins_open_quotes()
    test_logical_records_line_numbers()

    print("=" * 60)
    print("✅ Успішно!")


if __name__ == "__main__":
    demo()
