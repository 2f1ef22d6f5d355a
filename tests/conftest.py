"""Shared test fixtures for pgn-tally."""

from pathlib import Path

import pytest

GAME_TEMPLATE = """[Event "Casual Game"]
[Site "London"]
[Date "1851.06.21"]
[White "{white}"]
[Black "{black}"]
[Result "{result}"]

1. e4 e5 2. f4 exf4 3. Bc4 Qh4+ 4. Kf1 b5 {result}

"""


def make_game(result: str, white: str = "Anderssen", black: str = "Kieseritzky") -> str:
    return GAME_TEMPLATE.format(result=result, white=white, black=black)


def write_pgn(path: Path, *results: str) -> Path:
    """Write a PGN file holding one game per result."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(make_game(r) for r in results), encoding="latin-1")
    return path


@pytest.fixture
def three_results_dir(tmp_path):
    """Directory with one white win, one black win and one draw in separate files."""
    write_pgn(tmp_path / "white.pgn", "1-0")
    write_pgn(tmp_path / "black.pgn", "0-1")
    write_pgn(tmp_path / "draw.pgn", "1/2-1/2")
    return tmp_path


@pytest.fixture
def nested_dir(tmp_path):
    """Nested tree mixing matching and non-matching filenames."""
    write_pgn(tmp_path / "top.pgn", "1-0", "1-0")
    write_pgn(tmp_path / "a" / "b" / "c" / "deep.pgn", "0-1", "1/2-1/2", "*")
    write_pgn(tmp_path / "a" / "notes.txt", "1-0")
    write_pgn(tmp_path / "a" / "archive.pgn.bak", "0-1")
    write_pgn(tmp_path / "a" / "UPPER.PGN", "0-1")
    write_pgn(tmp_path / "a" / "b" / "inprogress.pgn", "-")
    return tmp_path
