"""Upward directory search shared by schema, configuration and metadata lookups."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

FileProbe = Callable[[Path], bool]


def find_upward(
    start_dir: Path | str, filename: str, *, is_file: FileProbe | None = None
) -> Path | None:
    """Return the nearest directory at or above `start_dir` containing `filename`.

    Args:
      start_dir: Directory the search starts from. Relative paths are made absolute
        against the current working directory.
      filename: Bare file name to look for in each directory.
      is_file: Probe deciding whether a candidate path is a regular file. Defaults
        to `Path.is_file`; tests can pass a lookup into a virtual filesystem.

    Returns:
      The containing directory, or None once the filesystem root is exhausted.
    """
    probe = is_file or Path.is_file
    start = Path(start_dir).absolute()
    for directory in (start, *start.parents):
        if probe(directory / filename):
            return directory
    return None
