"""Rule evaluation exports."""

from .condition_rules import ConditionRule, OsConstraint, RuleAction, RuleParseError, parse_rules
from .rule_evaluator import should_include

__all__ = [
    "ConditionRule",
    "OsConstraint",
    "RuleAction",
    "RuleParseError",
    "parse_rules",
    "should_include",
]
