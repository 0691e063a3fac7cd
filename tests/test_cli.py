import io

import pytest

from matrixlab.cli import format_matrix, load_matrices, main
from matrixlab.matrix import Matrix

FIRST = [[0, 0, 8], [6, 7, 8], [4, 1, 6]]
SECOND = [[6, 3, 7], [8, 6, 6], [3, 3, 5]]


def _write_input(tmp_path, size, *matrices):
    numbers = [str(size)]
    for matrix in matrices:
        for row in matrix:
            numbers.append(" ".join(str(v) for v in row))
    path = tmp_path / "matrices.txt"
    path.write_text("\n".join(numbers) + "\n")
    return path


def test_load_matrices_round_trip(tmp_path):
    path = _write_input(tmp_path, 3, FIRST, SECOND)
    first, second = load_matrices(path)
    assert first.rows() == FIRST
    assert second.rows() == SECOND


@pytest.mark.parametrize("size", ["0", "-2", "abc", ""])
def test_load_matrices_invalid_size(tmp_path, size):
    path = tmp_path / "bad.txt"
    path.write_text(size)
    with pytest.raises(ValueError, match="Invalid matrix size"):
        load_matrices(path)


def test_load_matrices_missing_values_are_zero(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("2\n1 2\n3 4\n5\n")
    first, second = load_matrices(path)
    assert first.rows() == [[1, 2], [3, 4]]
    assert second.rows() == [[5, 0], [0, 0]]


def test_load_matrices_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrices(tmp_path / "absent.txt")


def test_format_matrix_layout():
    text = format_matrix(Matrix([[1, 2], [3, 4]]), "M")
    assert text == "M:\n1  2  \n3  4  \n"


def test_format_matrix_lines_match_rows():
    lines = format_matrix(Matrix(FIRST), "Matrix 1").splitlines()
    assert lines[0] == "Matrix 1:"
    assert [[int(v) for v in line.split()] for line in lines[1:]] == FIRST


def test_main_full_session(tmp_path, monkeypatch, capsys):
    path = _write_input(tmp_path, 3, FIRST, SECOND)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{path}\n0 1\n0 2\n1 1 42\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Sum of First  Diagonal: 13" in out
    assert "Sum of Second Diagonal: 19" in out
    assert "116  84  124" in out
    assert "14  13  14" in out
    after_update = out.split("Matrix After Update:\n", 1)[1].splitlines()
    assert after_update[1].split()[1] == "42"


def test_main_with_file_argument(tmp_path, monkeypatch, capsys):
    path = _write_input(tmp_path, 3, FIRST, SECOND)
    monkeypatch.setattr("sys.stdin", io.StringIO("0 2\n0 2\n0 0 5\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Enter file name" not in out
    assert "Matrix After Swapping Rows:" in out


def test_main_invalid_indices_reported(tmp_path, monkeypatch, capsys):
    path = _write_input(tmp_path, 3, FIRST, SECOND)
    monkeypatch.setattr("sys.stdin", io.StringIO("5 0\n0 9\n3 3 1\n"))
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert "Invalid row indices!" in captured.err
    assert "Invalid column indices!" in captured.err
    assert "Invalid indices!" in captured.err
    assert "Matrix After Update" not in captured.out


def test_main_invalid_size_fails(tmp_path, monkeypatch, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("0\n")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([str(path)]) == 1
    assert "Invalid matrix size." in capsys.readouterr().err


def test_main_truncated_input_fails(tmp_path, monkeypatch, capsys):
    path = _write_input(tmp_path, 3, FIRST, SECOND)
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([str(path)]) == 1
    assert "Invalid input" in capsys.readouterr().err