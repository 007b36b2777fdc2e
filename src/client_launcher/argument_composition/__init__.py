"""Argument composition exports."""

from .argument_composer import compose_arguments, substitute_placeholders, template_tokens
from .runtime_context import (
    PLACEHOLDER_ACCESS_TOKEN,
    PLACEHOLDER_USER_TYPE,
    PLACEHOLDER_UUID,
    RuntimeContext,
)

__all__ = [
    "PLACEHOLDER_ACCESS_TOKEN",
    "PLACEHOLDER_USER_TYPE",
    "PLACEHOLDER_UUID",
    "RuntimeContext",
    "compose_arguments",
    "substitute_placeholders",
    "template_tokens",
]
