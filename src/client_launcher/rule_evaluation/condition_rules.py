"""Condition rule entities and their descriptor parsing."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class RuleParseError(ValueError):
    """Raised when a descriptor rule list has an unexpected shape."""


class RuleAction(str, Enum):
    """Decision a matching rule applies."""

    ALLOW = "allow"
    DISALLOW = "disallow"


@dataclass(frozen=True)
class OsConstraint:
    """Platform constraint attached to a rule."""

    name: str
    arch: str | None = None


@dataclass(frozen=True)
class ConditionRule:
    """One allow/disallow clause, optionally scoped to a platform.

    `action` is ``None`` for actions other than allow and disallow; such rules
    never change the inclusion decision.
    """

    action: RuleAction | None
    os: OsConstraint | None = None


def parse_rules(raw_rules: Any) -> tuple[ConditionRule, ...]:
    """Convert a descriptor `rules` list into condition rules.

    Args:
      raw_rules: The decoded JSON value, ``None`` when the entry has no rules.

    Returns:
      The rules in declaration order.

    Raises:
      RuleParseError: If the list, a rule or an os constraint is malformed.
    """
    if raw_rules is None:
        return ()
    if isinstance(raw_rules, str) or not isinstance(raw_rules, Sequence):
        raise RuleParseError("rules must be a list.")
    return tuple(_parse_rule(raw_rule, index) for index, raw_rule in enumerate(raw_rules))


def _parse_rule(raw_rule: Any, index: int) -> ConditionRule:
    if not isinstance(raw_rule, Mapping):
        raise RuleParseError(f"rules[{index}] must be an object.")
    return ConditionRule(
        action=_parse_action(raw_rule.get("action")),
        os=_parse_os(raw_rule.get("os"), index),
    )


def _parse_action(raw_action: Any) -> RuleAction | None:
    try:
        return RuleAction(raw_action)
    except ValueError:
        return None


def _parse_os(raw_os: Any, index: int) -> OsConstraint | None:
    if raw_os is None:
        return None
    if not isinstance(raw_os, Mapping):
        raise RuleParseError(f"rules[{index}].os must be an object.")
    name = raw_os.get("name")
    if not isinstance(name, str):
        raise RuleParseError(f"rules[{index}].os.name must be a string.")
    arch = raw_os.get("arch")
    if arch is not None and not isinstance(arch, str):
        raise RuleParseError(f"rules[{index}].os.arch must be a string.")
    return OsConstraint(name=name, arch=arch)
