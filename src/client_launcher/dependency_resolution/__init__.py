"""Dependency resolution exports."""

from .artifact_coordinates import ArtifactCoordinate, MalformedCoordinateError, parse_coordinate
from .dependency_resolver import (
    MissingRequiredFieldError,
    join_search_path,
    primary_artifact_path,
    resolve_dependency_paths,
)
from .resolution_outcomes import DependencyResolution, SkippedDependency, SkipReason

__all__ = [
    "ArtifactCoordinate",
    "DependencyResolution",
    "MalformedCoordinateError",
    "MissingRequiredFieldError",
    "SkipReason",
    "SkippedDependency",
    "join_search_path",
    "parse_coordinate",
    "primary_artifact_path",
    "resolve_dependency_paths",
]
