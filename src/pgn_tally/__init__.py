"""pgn-tally -- Count chess game results across directories of PGN files.

Quick start::

    from pgn_tally import tally_directory

    report = tally_directory("games/")
    print(report.tally.total, "games,", report.tally.white_wins, "white wins")
"""

__version__ = "1.0.0"

from .config import TallySettings

from .tally import (
    tally_directory,
    classify_line,
    extract_file_tally,
    merge_tallies,
    FilenameMatcher,
    PgnFileScanner,
    TallyAggregator,
    ReportFormatter,
    Outcome,
    Tally,
    FileTally,
    TallyIOError,
    TallyReport,
)

__all__ = [
    "__version__",
    # Config
    "TallySettings",
    # Pipeline
    "tally_directory",
    "classify_line",
    "extract_file_tally",
    "merge_tallies",
    "FilenameMatcher",
    "PgnFileScanner",
    "TallyAggregator",
    "ReportFormatter",
    # Types
    "Outcome",
    "Tally",
    "FileTally",
    "TallyIOError",
    "TallyReport",
]
