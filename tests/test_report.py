from app.normalize import normalize
from app.parser import parse
from app.report import column_stats, error_items, preview, summarize, validation_report


def test_summary_counts():
    table = parse("Nombre;Edad\nJosé;30\nAña;25;extra\n")
    assert summarize(table) == {
        "total_rows": 2,
        "valid_rows": 1,
        "error_rows": 1,
        "expected_columns": 2,
        "headers": ["Nombre", "Edad"],
    }


def test_errors_are_capped_at_ten():
    lines = ["a;b"] + ["x"] * 13
    table = parse("\n".join(lines))
    errors = error_items(table.row_errors)
    assert len(errors["items"]) == 10
    assert errors["remaining"] == 3
    assert errors["items"][0]["row"] == 2


def test_error_excerpt_is_truncated():
    long_line = "x" * 150
    table = parse("a;b\n" + long_line)
    item = error_items(table.row_errors)["items"][0]
    assert item["value"] == "x" * 100 + "..."


def test_column_fill():
    table = parse("a;b\n1;\n2;y\n;\n")
    assert column_stats(table) == [
        {"column": "a", "non_empty": 2, "fill_percent": 66.7},
        {"column": "b", "non_empty": 1, "fill_percent": 33.3},
    ]


def test_column_fill_without_records():
    table = parse("a;b\nonly-one-field\n")
    assert column_stats(table)[0]["fill_percent"] == 0.0


def test_validation_report_keeps_full_error_list_in_table():
    table = parse("a;b\n" + "\n".join(["bad"] * 12))
    report = validation_report(table)
    assert len(table.row_errors) == 12
    assert len(report["errors"]) == 10
    assert report["remaining_errors"] == 2


def test_preview_truncates_cells():
    table = normalize(parse("a\n" + "ñ" * 40 + "\n"))
    assert preview(table) == [{"a": "n" * 30 + "..."}]
