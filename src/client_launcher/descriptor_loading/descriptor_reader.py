"""Descriptor file loading and parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from client_launcher.rule_evaluation.condition_rules import RuleParseError, parse_rules

from .descriptor_models import ArgumentToken, DependencyEntry, Descriptor


class DescriptorLoadError(Exception):
    """Raised when a version descriptor cannot be loaded."""


class DescriptorNotFoundError(DescriptorLoadError):
    """Raised when the descriptor file does not exist."""


class DescriptorParseError(DescriptorLoadError):
    """Raised when the descriptor file is not a usable version definition."""


def descriptor_path(root_dir: Path | str, version_name: str) -> Path:
    """Return `<root>/versions/<name>/<name>.json`."""
    return Path(root_dir) / "versions" / version_name / f"{version_name}.json"


def load_descriptor(root_dir: Path | str, version_name: str) -> Descriptor:
    """Read and parse the descriptor of `version_name` under `root_dir`."""
    path = descriptor_path(root_dir, version_name)
    if not path.is_file():
        raise DescriptorNotFoundError(f"Version descriptor not found: {path}")
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DescriptorParseError(f"Invalid version descriptor {path}: {exc}") from exc
    except OSError as exc:
        raise DescriptorLoadError(f"Failed to read version descriptor {path}: {exc}") from exc
    return parse_descriptor(document, default_version_id=version_name)


def parse_descriptor(document: Any, *, default_version_id: str) -> Descriptor:
    """Build a descriptor from decoded JSON.

    Only the shapes resolution depends on are checked. A missing ``mainClass``
    is kept as ``None`` so that the resolver can report it, and malformed
    library entries are kept for the resolver to skip.
    """
    if not isinstance(document, Mapping):
        raise DescriptorParseError("Version descriptor root must be an object.")

    version_id = _optional_string(document, "id") or default_version_id
    main_class = document.get("mainClass")
    if main_class is not None and not isinstance(main_class, str):
        raise DescriptorParseError("mainClass must be a string.")

    return Descriptor(
        version_id=version_id,
        main_class=main_class,
        dependencies=_parse_dependencies(document.get("libraries")),
        legacy_arguments=_optional_string(document, "minecraftArguments"),
        structured_arguments=_parse_structured_arguments(document.get("arguments")),
        assets_index_id=_optional_string(document, "assets"),
        version_type=_optional_string(document, "type"),
    )


def _parse_dependencies(value: Any) -> tuple[DependencyEntry, ...]:
    if value is None:
        return ()
    if not _is_list(value):
        raise DescriptorParseError("libraries must be a list.")
    return tuple(_parse_dependency(raw, index) for index, raw in enumerate(value))


def _parse_dependency(raw: Any, index: int) -> DependencyEntry:
    if not isinstance(raw, Mapping):
        return DependencyEntry(coordinate="")
    name = raw.get("name")
    coordinate = name if isinstance(name, str) else ""
    natives = raw.get("natives")
    if natives is None:
        natives = {}
    elif isinstance(natives, Mapping):
        natives = dict(natives)
    try:
        rules = parse_rules(raw.get("rules"))
    except RuleParseError as exc:
        return DependencyEntry(
            coordinate=coordinate,
            native_classifiers=natives,
            rule_error=f"libraries[{index}]: {exc}",
        )
    return DependencyEntry(coordinate=coordinate, rules=rules, native_classifiers=natives)


def _parse_structured_arguments(value: Any) -> tuple[ArgumentToken, ...]:
    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise DescriptorParseError("arguments must be an object.")
    game = value.get("game")
    if game is None:
        return ()
    if not _is_list(game):
        raise DescriptorParseError("arguments.game must be a list.")
    # Conditional objects are kept as-is; the composer skips them.
    return tuple(token for token in game if isinstance(token, (str, Mapping)))


def _optional_string(document: Mapping[str, Any], key: str) -> str | None:
    value = document.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DescriptorParseError(f"{key} must be a string.")
    return value


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)
