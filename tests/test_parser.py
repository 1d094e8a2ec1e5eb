import pytest

from app.errors import EmptyInput
from app.parser import parse


def test_parse_example_with_one_bad_row():
    table = parse("Nombre;Edad\nJosé;30\nAña;25;extra\n")

    assert table.headers == ("Nombre", "Edad")
    assert table.records == ({"Nombre": "José", "Edad": "30"},)
    assert len(table.row_errors) == 1

    err = table.row_errors[0]
    assert err.line == 3
    assert err.expected == 2
    assert err.actual == 3
    assert err.data == "Aña;25;extra"
    assert err.issue == "row_column_mismatch"


def test_blank_only_input_is_empty():
    with pytest.raises(EmptyInput):
        parse("   \n\n")


def test_empty_string_is_empty():
    with pytest.raises(EmptyInput):
        parse("")


def test_well_formed_input_has_no_errors():
    table = parse("a;b;c\n1;2;3\n4;5;6\n7;8;9")
    assert table.row_errors == ()
    assert len(table.records) == 3
    assert table.expected_columns == 3


def test_headers_and_values_are_trimmed():
    table = parse("  id ; name \n 1 ;  Ana  \n")
    assert table.headers == ("id", "name")
    assert table.records[0] == {"id": "1", "name": "Ana"}


def test_crlf_line_endings_are_trimmed_from_values():
    table = parse("a;b\r\n1;2\r\n")
    assert table.headers == ("a", "b")
    assert table.records[0] == {"a": "1", "b": "2"}


def test_blank_lines_are_skipped_and_not_counted():
    table = parse("\n\na;b\n\n1;2\n   \n3\n")
    assert len(table.records) == 1
    # numbering follows the non-blank lines only
    assert table.row_errors[0].line == 3
    assert table.row_errors[0].actual == 1


def test_records_plus_errors_equals_data_lines():
    text = "h1;h2\nx;y\nonly\nx;y;z\n\n;\n"
    table = parse(text)
    data_lines = [l for l in text.split("\n") if l.strip()][1:]
    assert len(table.records) + len(table.row_errors) == len(data_lines)


def test_quoted_semicolon_is_still_a_delimiter():
    table = parse('a;b\n"x;y";z\n')
    assert table.records == ()
    assert table.row_errors[0].actual == 3


def test_empty_cells_become_empty_strings():
    table = parse("a;b;c\n;  ;\n")
    assert table.records[0] == {"a": "", "b": "", "c": ""}


def test_every_record_has_exactly_the_header_keys():
    table = parse("a;b\n1;2\n3;4\n")
    for record in table.records:
        assert list(record) == ["a", "b"]
