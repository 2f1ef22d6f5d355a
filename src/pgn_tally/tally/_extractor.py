"""Per-file tally extraction."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Union

from ._classifier import classify_line
from ._types import Tally, TallyIOError

logger = logging.getLogger(__name__)

# Single-byte decoding: every byte value maps to a character, so reads never
# fail on non-ASCII player names or comments.
DEFAULT_ENCODING = "latin-1"


def iter_lines(
    file_path: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[str]:
    """Yield the lines of *file_path* decoded with *encoding*.

    Raises ``TallyIOError`` if the file cannot be opened or read.
    """
    if file_path is None:
        raise ValueError("Path to file cannot be None")
    return _read_lines(file_path, encoding)


def _read_lines(file_path: Union[str, Path], encoding: str) -> Iterator[str]:
    try:
        with open(file_path, "r", encoding=encoding) as f:
            for line in f:
                yield line
    except (OSError, UnicodeDecodeError) as exc:
        raise TallyIOError(f"Error reading file: {file_path}", path=file_path) from exc


def extract_file_tally(
    file_path: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
) -> Tally:
    """Count the declared results in one game record file.

    Lines that carry no result are skipped; every classifiable line counts,
    so a file holding several games contributes one result per game.
    """
    outcomes = (classify_line(line) for line in iter_lines(file_path, encoding))
    tally = Tally.from_outcomes(o for o in outcomes if o is not None)
    logger.debug(
        "Tallied %s: %d white, %d black, %d draws",
        file_path,
        tally.white_wins,
        tally.black_wins,
        tally.draws,
    )
    return tally
