"""Runtime settings for tally runs."""
from __future__ import annotations

import codecs
import os

from pydantic import BaseModel, Field, field_validator


class TallySettings(BaseModel):
    """Settings shared by the pipeline and the CLI.

    The filename matcher is built once from ``pattern`` and handed to the
    scanner; nothing here is mutated during a run.
    """
    pattern: str = Field(default="*.pgn", min_length=1)
    max_workers: int = Field(default=4, ge=1)
    encoding: str = "latin-1"
    fail_fast: bool = True

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"Unknown encoding: {value}") from None
        return value

    @classmethod
    def from_env(cls) -> "TallySettings":
        """Read overrides from ``PGN_TALLY_*`` environment variables."""
        defaults = cls()
        return cls(
            pattern=os.getenv("PGN_TALLY_PATTERN", "") or defaults.pattern,
            max_workers=os.getenv("PGN_TALLY_WORKERS", "") or defaults.max_workers,
            encoding=os.getenv("PGN_TALLY_ENCODING", "") or defaults.encoding,
            fail_fast=os.getenv("PGN_TALLY_FAIL_FAST", "") or defaults.fail_fast,
        )
