"""Dependency search path resolution service."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from client_launcher.descriptor_loading.descriptor_models import DependencyEntry, Descriptor
from client_launcher.platform_targeting.platform_models import Platform
from client_launcher.rule_evaluation.rule_evaluator import should_include

from .artifact_coordinates import ArtifactCoordinate, MalformedCoordinateError, parse_coordinate
from .resolution_outcomes import DependencyResolution, SkippedDependency, SkipReason

ExistenceCheck = Callable[[Path], bool]

ARCH_PLACEHOLDER = "${arch}"


class MissingRequiredFieldError(Exception):
    """Raised when the descriptor lacks a field resolution cannot do without."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Version descriptor is missing required field '{field_name}'.")
        self.field_name = field_name


def primary_artifact_path(descriptor: Descriptor, root_dir: Path) -> Path:
    """Return `<root>/versions/<id>/<id>.jar`."""
    if not descriptor.version_id or not descriptor.version_id.strip():
        raise MissingRequiredFieldError("id")
    return root_dir / "versions" / descriptor.version_id / f"{descriptor.version_id}.jar"


def resolve_dependency_paths(
    descriptor: Descriptor,
    platform: Platform,
    root_dir: Path | str,
    *,
    exists: ExistenceCheck | None = None,
) -> DependencyResolution:
    """Resolve the ordered search path for `descriptor` on `platform`.

    The primary artifact always comes first. Each dependency entry then adds at
    most one jar: its native variant for the platform when that file exists,
    otherwise its plain jar when that exists. Entries that add nothing,
    including malformed ones, are reported in `DependencyResolution.skipped`
    and never abort resolution.

    Args:
      descriptor: Parsed version definition.
      platform: Target platform; rules and native classifiers are matched on it.
      root_dir: Game directory containing `versions/` and `libraries/`.
      exists: Existence check used for every candidate jar.

    Raises:
      MissingRequiredFieldError: If `mainClass` or the version id is absent.
    """
    if not descriptor.main_class or not descriptor.main_class.strip():
        raise MissingRequiredFieldError("mainClass")
    check_exists = exists or Path.exists
    root = Path(root_dir)
    libraries_dir = root / "libraries"

    paths: list[Path] = [primary_artifact_path(descriptor, root)]
    skipped: list[SkippedDependency] = []
    for entry in descriptor.dependencies:
        if entry.rule_error is not None:
            skipped.append(
                SkippedDependency(entry.coordinate, SkipReason.MALFORMED_RULES, entry.rule_error)
            )
            continue
        if not should_include(entry.rules, platform):
            skipped.append(SkippedDependency(entry.coordinate, SkipReason.EXCLUDED_BY_RULES))
            continue
        try:
            coordinate = parse_coordinate(entry.coordinate)
        except MalformedCoordinateError as exc:
            skipped.append(
                SkippedDependency(entry.coordinate, SkipReason.MALFORMED_COORDINATE, str(exc))
            )
            continue
        resolved = _resolve_entry_jar(
            entry, coordinate, platform, libraries_dir, exists=check_exists
        )
        if isinstance(resolved, SkippedDependency):
            skipped.append(resolved)
        else:
            paths.append(resolved)
    return DependencyResolution(paths=tuple(paths), skipped=tuple(skipped))


def join_search_path(paths: Iterable[Path | str], separator: str = os.pathsep) -> str:
    """Join resolved paths with the platform's path-list separator."""
    return separator.join(str(path) for path in paths)


def _resolve_entry_jar(
    entry: DependencyEntry,
    coordinate: ArtifactCoordinate,
    platform: Platform,
    libraries_dir: Path,
    *,
    exists: ExistenceCheck,
) -> Path | SkippedDependency:
    base_dir = coordinate.directory(libraries_dir)
    natives = entry.native_classifiers
    if not isinstance(natives, Mapping):
        return SkippedDependency(
            entry.coordinate, SkipReason.MALFORMED_NATIVES, "natives must be an object"
        )
    template = natives.get(platform.name)
    if template is not None and not isinstance(template, str):
        return SkippedDependency(
            entry.coordinate,
            SkipReason.MALFORMED_NATIVES,
            f"natives.{platform.name} must be a string",
        )
    if template is not None:
        classifier = template.replace(ARCH_PLACEHOLDER, platform.arch_bits)
        native_jar = base_dir / coordinate.jar_name(classifier)
        if exists(native_jar):
            return native_jar

    plain_jar = base_dir / coordinate.jar_name()
    if exists(plain_jar):
        return plain_jar
    return SkippedDependency(
        entry.coordinate, SkipReason.ARTIFACT_NOT_FOUND, f"No jar found at {plain_jar}"
    )
