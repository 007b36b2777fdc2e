"""Launch execution domain exports."""

from .launch_contracts import LaunchOutcome, LaunchRequest, ResolvedLaunch
from .launch_use_case import LaunchExecutionError, execute_launch, resolve_launch

__all__ = [
    "LaunchRequest",
    "LaunchOutcome",
    "ResolvedLaunch",
    "LaunchExecutionError",
    "execute_launch",
    "resolve_launch",
]
