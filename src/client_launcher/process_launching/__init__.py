"""Process launching exports."""

from .process_launcher import LaunchError, ProcessHandle, ProcessLauncher, SubprocessProcessLauncher

__all__ = ["LaunchError", "ProcessHandle", "ProcessLauncher", "SubprocessProcessLauncher"]
