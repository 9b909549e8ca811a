"""File resolution domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ResolutionStatus(str, Enum):
    """Outcome of locating and loading one named file."""

    LOADED = "loaded"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class ResolvedFile:
    """Tagged result of a file resolution attempt."""

    status: ResolutionStatus
    path: Path | None
    value: Mapping[str, object] | None
    reason: str | None

    @staticmethod
    def loaded(path: Path, value: Mapping[str, object]) -> ResolvedFile:
        return ResolvedFile(
            status=ResolutionStatus.LOADED,
            path=path,
            value=value,
            reason=None,
        )

    @staticmethod
    def not_found() -> ResolvedFile:
        return ResolvedFile(
            status=ResolutionStatus.NOT_FOUND,
            path=None,
            value=None,
            reason=None,
        )

    @staticmethod
    def parse_error(path: Path, reason: str) -> ResolvedFile:
        return ResolvedFile(
            status=ResolutionStatus.PARSE_ERROR,
            path=path,
            value=None,
            reason=reason,
        )
