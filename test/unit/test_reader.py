"""Tests for reading and validating operator input."""

import pytest

from pauliqasm.errors import InputFormatError
from pauliqasm.operators import MAX_PARAMETER, OperatorRecord
from pauliqasm.reader import (
    parse_operator_line,
    read_operator_file,
    read_operator_lines,
)


def test_parse_operator_line():
    assert parse_operator_line("IXIZY 0.25 3", 1) == ("IXIZY", 0.25, 3)


def test_parse_operator_line_ignores_extra_tokens():
    assert parse_operator_line("XZ  -1.5\t0 trailing", 1) == ("XZ", -1.5, 0)


def test_read_operator_lines():
    records, qubit_count = read_operator_lines(["XIZ 2.0 0", "ZZI 1.0 1", "IYY -3 0"])
    assert qubit_count == 3
    assert records == [
        OperatorRecord(1, "XIZ", 2.0, 1),
        OperatorRecord(2, "ZZI", 1.0, 1),
        OperatorRecord(3, "IYY", -3.0, 3),
    ]


def test_blank_lines_are_skipped():
    records, qubit_count = read_operator_lines(["XY 1 0", "", "   ", "ZZ 2 0", ""])
    assert qubit_count == 2
    assert [r.position for r in records] == [1, 2]
    assert records[1].parameter == 2


def test_empty_input():
    assert read_operator_lines([]) == ([], 0)


def test_unsupported_characters_are_left_to_the_decoder():
    records, _ = read_operator_lines(["XQZ 1.0 0"])
    assert records[0].symbol_string == "XQZ"


def test_max_parameter_is_accepted():
    records, _ = read_operator_lines([f"X 1.0 {MAX_PARAMETER}"])
    assert records[0].parameter == MAX_PARAMETER


@pytest.mark.parametrize(
    "lines, line, message",
    [
        (["XY 1.0"], 1, "Wrong format!"),
        (["XY one 0"], 1, "Wrong format!"),
        (["XY 1.0 0.5"], 1, "Wrong format!"),
        (["XY nan 0"], 1, "Wrong format!"),
        (["XY 1.0 0", "XYZ 1.0 0"], 2, "Non-matching length of string representation!"),
        (["XYZ 1.0 0", "XY 1.0 0"], 2, "Non-matching length of string representation!"),
        (["XY 1.0 0", "", "ZZ 0.0 0"], 3, "Zero coefficient!"),
        (["XY 1.0 -1"], 1, "Negative parameter!"),
        ([f"XY 1.0 {MAX_PARAMETER + 1}"], 1, "Parameter out of bound!"),
    ],
)
def test_validation_errors(lines, line, message):
    with pytest.raises(InputFormatError) as excinfo:
        read_operator_lines(lines)
    assert excinfo.value.line == line
    assert excinfo.value.message == message
    assert str(excinfo.value) == f"line {line}: {message}"


def test_read_operator_file(tmp_path):
    path = tmp_path / "ansatz.txt"
    path.write_text("XIZ 2.0 0\nZZI 1.0 1\n", encoding="utf-8")
    records, qubit_count = read_operator_file(path)
    assert qubit_count == 3
    assert len(records) == 2
    assert records[0].parameter == 1


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_operator_file(tmp_path / "missing.txt")
