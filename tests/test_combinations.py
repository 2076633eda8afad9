import io
from itertools import islice

import pytest

from datastructs.combinations import (
    combination_lines,
    fixed_matrix_lines,
    odometer_lines,
    print_lines,
)

ROWS = [["1", "2", "3", "4"], ["x", "y", "z"], ["9", "8", "7", "6"]]


def test_fixed_matrix_lines_shape():
    lines = list(fixed_matrix_lines())
    assert len(lines) == 64
    assert lines[0] == "1x9"
    assert all(line[0] in "1234" and line[-1] in "9876" for line in lines)
    assert {len(line) for line in lines} == {2, 3}


def test_fixed_matrix_lines_include_middle_skip():
    lines = list(fixed_matrix_lines())
    short = [line for line in lines if len(line) == 2]
    assert len(short) == len(set(short))
    assert "19" in short
    assert "46" in short


def test_combination_lines_pick_one_from_each_row():
    lines = list(combination_lines(ROWS))
    assert lines[0] == "1x9"
    assert lines[-1] == ROWS[0][-1] + ROWS[1][-1] + ROWS[2][-1]
    assert len(lines) == len(set(lines))
    assert len(lines) == len(ROWS[0]) * len(ROWS[1]) * len(ROWS[2])
    for line in lines:
        assert len(line) == len(ROWS)
        assert all(ch in row for ch, row in zip(line, ROWS))


def test_combination_lines_counts_characters_not_entries():
    assert list(combination_lines([["ab"], ["c"]])) == ["ab"]


def test_combination_lines_of_no_rows_is_empty():
    assert list(combination_lines([])) == []


def test_odometer_stops_at_end_line():
    assert list(odometer_lines([["a", "a"], ["b", "b"]])) == ["ab"]


def test_odometer_first_line_and_bounded_output():
    lines = list(islice(odometer_lines(ROWS), 50))
    assert len(lines) == 50
    assert lines[0] == "1x9"
    assert all(len(line) <= len(ROWS) for line in lines)


@pytest.mark.parametrize("rows", [[], [[]], [["a"], []]])
def test_odometer_rejects_empty_rows(rows):
    with pytest.raises(ValueError):
        next(odometer_lines(rows))


def test_print_lines_writes_each_line():
    buffer = io.StringIO()
    print_lines(["a", "b"], buffer)
    assert buffer.getvalue() == "a\nb\n"


def test_print_lines_to_stdout(capsys):
    print_lines(combination_lines([["ab"], ["c"]]))
    assert capsys.readouterr().out == "ab\n"