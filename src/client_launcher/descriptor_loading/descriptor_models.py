"""Version descriptor entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from client_launcher.rule_evaluation.condition_rules import ConditionRule

# Structured argument tokens are plain strings or conditional objects.
ArgumentToken = str | Mapping[str, Any]


@dataclass(frozen=True)
class DependencyEntry:
    """One library referenced by a descriptor.

    Entries are kept even when malformed so that resolution can skip them:
    a missing name becomes an empty coordinate, `native_classifiers` holds the
    raw `natives` value and `rule_error` describes an unparseable rule list.
    """

    coordinate: str
    rules: tuple[ConditionRule, ...] = ()
    native_classifiers: Any = field(default_factory=dict)
    rule_error: str | None = None


@dataclass(frozen=True)
class Descriptor:  # pylint: disable=too-many-instance-attributes
    """Parsed version definition."""

    version_id: str
    main_class: str | None
    dependencies: tuple[DependencyEntry, ...] = ()
    legacy_arguments: str | None = None
    structured_arguments: tuple[ArgumentToken, ...] = ()
    assets_index_id: str | None = None
    version_type: str | None = None
