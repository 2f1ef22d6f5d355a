"""Pydantic models for game result tallies.

Defines the outcome categories, the per-file and total tallies, and the
run summary reported once every file has been processed.
"""
from __future__ import annotations

import uuid
from collections import Counter
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


def _new_id(prefix: str = "tally") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class Outcome(str, Enum):
    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"


class TallyStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


class TallyIOError(OSError):
    """Traversal or read failure, carrying the offending path."""

    def __init__(self, message: str, path: Union[str, Path, None] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class Tally(BaseModel):
    """Count of games per outcome.

    Tallies are immutable and combine with ``+``. Addition is commutative and
    associative with ``Tally()`` as identity, so ``sum(tallies, Tally())``
    gives the same total whatever order the tallies arrive in.
    """
    model_config = ConfigDict(frozen=True)

    white_wins: int = Field(default=0, ge=0)
    black_wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> int:
        return self.white_wins + self.black_wins + self.draws

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[Outcome]) -> "Tally":
        counts = Counter(outcomes)
        return cls(
            white_wins=counts[Outcome.WHITE_WINS],
            black_wins=counts[Outcome.BLACK_WINS],
            draws=counts[Outcome.DRAW],
        )

    def count(self, outcome: Outcome) -> int:
        if outcome == Outcome.WHITE_WINS:
            return self.white_wins
        if outcome == Outcome.BLACK_WINS:
            return self.black_wins
        return self.draws

    def __add__(self, other: "Tally") -> "Tally":
        if not isinstance(other, Tally):
            return NotImplemented
        return Tally(
            white_wins=self.white_wins + other.white_wins,
            black_wins=self.black_wins + other.black_wins,
            draws=self.draws + other.draws,
        )

    def __radd__(self, other: object) -> "Tally":
        # sum() starts from int 0 unless given a start value
        if other == 0:
            return self
        return NotImplemented


class FileTally(BaseModel):
    """Tally result for a single game record file."""
    file_path: str = ""
    file_name: str = ""
    status: TallyStatus = TallyStatus.OK
    tally: Tally = Field(default_factory=Tally)
    error_message: Optional[str] = None


class TallyRun(BaseModel):
    """Raw aggregation output: the folded total plus every per-file result."""
    tally: Tally = Field(default_factory=Tally)
    files: List[FileTally] = Field(default_factory=list)

    @property
    def failed(self) -> List[FileTally]:
        return [f for f in self.files if f.status == TallyStatus.ERROR]


class TallyReport(BaseModel):
    """Run summary handed to the formatter once all files are folded in."""
    report_id: str = Field(default_factory=lambda: _new_id("report"))
    directory: str = ""
    tally: Tally = Field(default_factory=Tally)

    files_found: int = 0
    files_tallied: int = 0
    files_failed: int = 0
    failed_files: List[str] = Field(default_factory=list)

    duration_seconds: float = 0.0
    files_per_second: float = 0.0
