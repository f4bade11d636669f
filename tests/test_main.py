# tests/test_main.py
import pytest

from main import main, solve_file
from conftest import EASY_SOLUTION


def test_cli_solves_puzzle(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "easy.txt")]) == 0
    out = capsys.readouterr().out
    assert "Resuelto" in out
    for r in range(9):
        assert EASY_SOLUTION[r * 9:(r + 1) * 9] in out


def test_cli_reports_unsolvable(puzzles_dir, capsys):
    code = main([str(puzzles_dir / "easy.txt"), str(puzzles_dir / "unsolvable.txt")])
    assert code == 1
    assert "No se pudo resolver" in capsys.readouterr().out


def test_cli_aborts_on_malformed_input(tmp_path, capsys):
    bad = tmp_path / "malo.txt"
    bad.write_text("X" * 81, encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(bad)])
    assert exc.value.code == 2
    assert "inválido" in capsys.readouterr().err


def test_cli_aborts_on_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "no_existe.txt")])
    assert exc.value.code == 2


def test_cli_node_limit(puzzles_dir, capsys):
    assert main([str(puzzles_dir / "empty.txt"), "--max-nodes", "3"]) == 1
    assert "abandonada" in capsys.readouterr().out


def test_solve_file_returns_solution(puzzles_dir):
    solved = solve_file(str(puzzles_dir / "easy.txt"))
    assert solved.is_valid_solution()
