"""Game record file discovery.

Walks a directory tree of any depth with an explicit stack of pending
directories and collects every file whose name matches a glob pattern.
"""
from __future__ import annotations

import fnmatch
import logging
import os
import re
from pathlib import Path
from typing import Iterator, List, Optional, Union

from ._types import TallyIOError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.pgn"


class FilenameMatcher:
    """Case-sensitive glob matcher applied to the final path component only.

    Build once and share; it holds no mutable state.
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN) -> None:
        self.pattern = pattern
        self._regex = re.compile(fnmatch.translate(pattern))

    def matches(self, path: Union[str, Path, None]) -> bool:
        if path is None:
            return False
        name = Path(path).name
        if not name:
            return False
        return self._regex.match(name) is not None

    def __repr__(self) -> str:
        return f"FilenameMatcher({self.pattern!r})"


class PgnFileScanner:
    """Find game record files under a root directory.

    Parameters
    ----------
    matcher : FilenameMatcher, optional
        Filename filter (default ``*.pgn``).
    """

    def __init__(self, matcher: Optional[FilenameMatcher] = None) -> None:
        self.matcher = matcher or FilenameMatcher()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self, root: Union[str, Path]) -> List[Path]:
        """Return every matching file under *root*, sorted.

        Raises
        ------
        ValueError
            If *root* is ``None``.
        TallyIOError
            If *root* or any directory below it cannot be listed.
        """
        files = sorted(self.iter_files(root))
        logger.info(
            "Found %d files matching %s under %s",
            len(files),
            self.matcher.pattern,
            root,
        )
        return files

    def iter_files(self, root: Union[str, Path]) -> Iterator[Path]:
        """Yield matching files under *root* in traversal order."""
        if root is None:
            raise ValueError("Base directory path cannot be None")

        pending = [Path(root)]
        while pending:
            directory = pending.pop()
            for entry in self._list_directory(directory):
                if entry.is_dir(follow_symlinks=False):
                    pending.append(Path(entry.path))
                elif self.matcher.matches(entry.name) and not entry.is_dir():
                    # symlinked directories are neither followed nor yielded
                    yield Path(entry.path)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _list_directory(self, directory: Path) -> List[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                return list(it)
        except OSError as exc:
            raise TallyIOError(
                f"Cannot traverse directory: {directory} ({exc.strerror or exc})",
                path=directory,
            ) from exc
