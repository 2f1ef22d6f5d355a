"""Concurrent tally aggregation.

Each file is tallied on a bounded ``ThreadPoolExecutor`` into a private
per-file ``Tally``. Only the calling thread touches the running total: it
folds finished results one at a time as they complete, and tally addition is
order independent, so completion order never changes the final counts.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from functools import reduce
from operator import add
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from ._extractor import DEFAULT_ENCODING, extract_file_tally
from ._types import FileTally, Tally, TallyIOError, TallyRun, TallyStatus

logger = logging.getLogger(__name__)


def merge_tallies(tallies: Iterable[Tally]) -> Tally:
    """Fold *tallies* into one total. Order does not matter."""
    return reduce(add, tallies, Tally())


class TallyAggregator:
    """Tally many game record files concurrently.

    Parameters
    ----------
    max_workers : int
        Number of worker threads (default 4).
    encoding : str
        Decoding used for every file (default ISO-8859-1).
    fail_fast : bool
        If True (default), the first unreadable file aborts the run and its
        error is re-raised. If False, unreadable files are logged, recorded
        with ``TallyStatus.ERROR`` and left out of the total.
    """

    def __init__(
        self,
        max_workers: int = 4,
        encoding: str = DEFAULT_ENCODING,
        fail_fast: bool = True,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self.encoding = encoding
        self.fail_fast = fail_fast

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def aggregate(
        self,
        paths: Iterable[Union[str, Path]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None,
    ) -> TallyRun:
        """Tally every file in *paths* and fold the results.

        Parameters
        ----------
        paths : iterable of path-like
            Files to tally, typically from ``PgnFileScanner.scan``.
        progress_callback : callable, optional
            Called as ``callback(completed, total, file_name)`` after each file.

        Returns
        -------
        TallyRun
            The total tally plus one ``FileTally`` per input file.
        """
        if paths is None:
            raise ValueError("File paths cannot be None")

        files = [Path(p) for p in paths]
        total = len(files)
        results: List[FileTally] = []
        running = Tally()

        if total == 0:
            return TallyRun(tally=running, files=results)

        pool = ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            futures: Dict[Future, Path] = {
                pool.submit(extract_file_tally, f, self.encoding): f for f in files
            }
            for idx, future in enumerate(as_completed(futures), 1):
                file_path = futures[future]
                result = self._collect(future, file_path)
                if result.status == TallyStatus.OK:
                    running = running + result.tally
                results.append(result)
                if progress_callback:
                    progress_callback(idx, total, file_path.name)
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise
        else:
            pool.shutdown(wait=True)

        failed = total - sum(1 for r in results if r.status == TallyStatus.OK)
        logger.info(
            "Aggregated %d files (%d failed): %d games",
            total,
            failed,
            running.total,
        )
        return TallyRun(tally=running, files=results)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _collect(self, future: Future, file_path: Path) -> FileTally:
        """Turn a finished future into a ``FileTally``, applying the failure policy."""
        try:
            tally = future.result()
        except TallyIOError as exc:
            if self.fail_fast:
                raise
            logger.warning("Skipping %s: %s", file_path, exc.__cause__ or exc)
            return FileTally(
                file_path=str(file_path),
                file_name=file_path.name,
                status=TallyStatus.ERROR,
                error_message=f"{exc}: {exc.__cause__}" if exc.__cause__ else str(exc),
            )

        return FileTally(
            file_path=str(file_path),
            file_name=file_path.name,
            tally=tally,
        )
