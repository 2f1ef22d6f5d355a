"""Game result tallying: concurrent scanning of PGN game records.

Public API:
    tally_directory - Scan a directory tree and tally every declared result
    classify_line - Map one line to the outcome it declares
    PgnFileScanner - Recursive file discovery for custom workflows
    TallyAggregator - Bounded thread-pool fan-out and fold
    ReportFormatter - Line / JSON / rich table rendering
"""
from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Optional, Union

from ..config import TallySettings
from ._aggregator import TallyAggregator, merge_tallies
from ._classifier import RESULT_MARKER, classify_line
from ._extractor import extract_file_tally, iter_lines
from ._report import ReportFormatter
from ._scanner import FilenameMatcher, PgnFileScanner
from ._types import (
    FileTally,
    Outcome,
    Tally,
    TallyIOError,
    TallyReport,
    TallyRun,
    TallyStatus,
)

__all__ = [
    "tally_directory",
    "classify_line",
    "extract_file_tally",
    "iter_lines",
    "merge_tallies",
    "FilenameMatcher",
    "PgnFileScanner",
    "TallyAggregator",
    "ReportFormatter",
    "RESULT_MARKER",
    "FileTally",
    "Outcome",
    "Tally",
    "TallyIOError",
    "TallyReport",
    "TallyRun",
    "TallyStatus",
]


def tally_directory(
    directory: Union[str, Path],
    settings: Optional[TallySettings] = None,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
) -> TallyReport:
    """Tally every game result in the game record files under *directory*.

    Args:
        directory: Root of the tree to scan.
        settings: Pattern, worker count, encoding and failure policy
            (default ``TallySettings()``).
        progress_callback: Optional ``callback(completed, total, filename)``.

    Returns:
        TallyReport with the total tally and per-run file counts.

    Raises:
        FileNotFoundError: *directory* does not exist.
        NotADirectoryError: *directory* is not a directory.
        TallyIOError: a directory or file could not be read (with
            ``fail_fast`` the first file failure aborts the run).
    """
    if directory is None:
        raise ValueError("Base directory path cannot be None")

    settings = settings or TallySettings()
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    t0 = time.time()

    # 1. Scan
    scanner = PgnFileScanner(FilenameMatcher(settings.pattern))
    files = scanner.scan(root)

    # 2. Tally
    aggregator = TallyAggregator(
        max_workers=settings.max_workers,
        encoding=settings.encoding,
        fail_fast=settings.fail_fast,
    )
    run = aggregator.aggregate(files, progress_callback=progress_callback)

    # 3. Report
    duration = time.time() - t0
    return ReportFormatter().build_report(str(directory), run, duration)
