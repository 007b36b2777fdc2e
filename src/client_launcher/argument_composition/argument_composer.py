"""Game argument template composition service."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from client_launcher.descriptor_loading.descriptor_models import Descriptor

from .runtime_context import RuntimeContext


def template_tokens(descriptor: Descriptor) -> list[str]:
    """Collect raw template tokens, legacy string first, then structured strings.

    Conditional (object) tokens of the structured form are skipped.
    """
    tokens: list[str] = []
    if descriptor.legacy_arguments:
        tokens.extend(descriptor.legacy_arguments.split())
    tokens.extend(token for token in descriptor.structured_arguments if isinstance(token, str))
    return tokens


def substitute_placeholders(
    tokens: Iterable[str], replacements: Mapping[str, str]
) -> tuple[str, ...]:
    """Replace each `${name}` marker literally, once per placeholder.

    Unknown markers are left untouched. Template tokens that are blank before
    substitution are dropped; substituted values are kept verbatim, so an
    empty value still occupies its argument slot.
    """
    substituted: list[str] = []
    for token in tokens:
        template = token.strip()
        if not template:
            continue
        for name, value in replacements.items():
            template = template.replace(f"${{{name}}}", value)
        substituted.append(template)
    return tuple(substituted)


def compose_arguments(descriptor: Descriptor, context: RuntimeContext) -> tuple[str, ...]:
    """Return the fully substituted game arguments for `descriptor`."""
    return substitute_placeholders(template_tokens(descriptor), context.replacements())
