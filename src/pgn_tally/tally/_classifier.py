"""Result line classifier.

Maps one line of a game record to the outcome it declares, if any. Only the
``[Result ...]`` tag is inspected; move text and other tags are ignored.
"""
from __future__ import annotations

from typing import Optional

from ._types import Outcome

RESULT_MARKER = "[Result"

# Character right before the first "-" of the score.
# "1/2-1/2" resolves on the "2" of the first half point.
_SCORE_CHARS = {
    "0": Outcome.BLACK_WINS,
    "1": Outcome.WHITE_WINS,
    "2": Outcome.DRAW,
}


def classify_line(line: Optional[str]) -> Optional[Outcome]:
    """Return the outcome declared by *line*, or ``None``.

    ``None`` covers absent input, lines that do not start with ``[Result``,
    games still in progress (``[Result "-"]``) and malformed scores.
    """
    if not line or not line.startswith(RESULT_MARKER):
        return None

    index = line.find("-")
    if index == -1:
        return None

    return _SCORE_CHARS.get(line[index - 1])
