"""Dependency resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SkipReason(str, Enum):
    """Why a dependency entry contributed no path."""

    EXCLUDED_BY_RULES = "excluded_by_rules"
    MALFORMED_RULES = "malformed_rules"
    MALFORMED_COORDINATE = "malformed_coordinate"
    MALFORMED_NATIVES = "malformed_natives"
    ARTIFACT_NOT_FOUND = "artifact_not_found"


@dataclass(frozen=True)
class SkippedDependency:
    """Diagnostic record for one dropped dependency entry."""

    coordinate: str
    reason: SkipReason
    detail: str | None = None


@dataclass(frozen=True)
class DependencyResolution:
    """Ordered search path plus the entries that were dropped."""

    paths: tuple[Path, ...]
    skipped: tuple[SkippedDependency, ...] = ()

    @property
    def primary_artifact(self) -> Path:
        return self.paths[0]
