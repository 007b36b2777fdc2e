"""Library coordinate parsing and on-disk layout."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class MalformedCoordinateError(ValueError):
    """Raised when a coordinate lacks the group, artifact or version segment."""


@dataclass(frozen=True)
class ArtifactCoordinate:
    """Parsed `group:artifact:version[:classifier]` coordinate."""

    group: str
    artifact: str
    version: str
    classifier: str | None = None

    def directory(self, libraries_dir: Path) -> Path:
        """Return the directory holding this artifact's jars."""
        return libraries_dir.joinpath(*self.group.split("."), self.artifact, self.version)

    def jar_name(self, classifier: str | None = None) -> str:
        chosen = classifier if classifier is not None else self.classifier
        suffix = f"-{chosen}" if chosen else ""
        return f"{self.artifact}-{self.version}{suffix}.jar"


def parse_coordinate(raw: str) -> ArtifactCoordinate:
    """Split a coordinate string; extra segments past the classifier are ignored."""
    parts = raw.split(":")
    if len(parts) < 3 or not all(part.strip() for part in parts[:3]):
        raise MalformedCoordinateError(f"Malformed library coordinate: '{raw}'")
    classifier = parts[3].strip() if len(parts) > 3 and parts[3].strip() else None
    return ArtifactCoordinate(
        group=parts[0].strip(),
        artifact=parts[1].strip(),
        version=parts[2].strip(),
        classifier=classifier,
    )
