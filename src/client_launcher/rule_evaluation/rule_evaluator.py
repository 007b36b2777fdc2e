"""Platform rule evaluation for dependency entries."""

from __future__ import annotations

from collections.abc import Sequence

from client_launcher.platform_targeting.platform_models import Platform

from .condition_rules import ConditionRule, RuleAction


def should_include(rules: Sequence[ConditionRule], platform: Platform) -> bool:
    """Return whether an entry guarded by `rules` applies to `platform`.

    Every rule is visited in order and the last applicable one decides. An
    empty rule list includes the entry unconditionally. Architecture is only
    compared on allow rules; a disallow rule matching the platform name
    excludes the entry whatever its arch constraint says. Rules with an
    unrecognised action are ignored.
    """
    decision = True
    for rule in rules:
        if rule.action == RuleAction.ALLOW:
            decision = _allow_decision(rule, platform)
        elif rule.action == RuleAction.DISALLOW and (
            rule.os is None or rule.os.name == platform.name
        ):
            decision = False
    return decision


def _allow_decision(rule: ConditionRule, platform: Platform) -> bool:
    if rule.os is None:
        return True
    if rule.os.name != platform.name:
        return False
    return rule.os.arch is None or rule.os.arch == platform.arch
