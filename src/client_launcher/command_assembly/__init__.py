"""Command assembly exports."""

from .command_builder import build_command, fixed_jvm_flags, memory_flags
from .command_models import Command, LaunchOptions

__all__ = ["Command", "LaunchOptions", "build_command", "fixed_jvm_flags", "memory_flags"]
