"""Game process spawning backed by subprocess."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from client_launcher.command_assembly.command_models import Command

PopenFactory = Callable[..., Any]


class LaunchError(Exception):
    """Raised when the game process cannot be started."""


class ProcessHandle(Protocol):  # pylint: disable=too-few-public-methods
    """Subset of `subprocess.Popen` the launcher hands back."""

    pid: int

    def wait(self, timeout: float | None = None) -> int: ...


class ProcessLauncher(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for launchers consuming an assembled command."""

    def launch(self, command: Command) -> ProcessHandle: ...


class SubprocessProcessLauncher:  # pylint: disable=too-few-public-methods
    """Start the command as a child process sharing this process's stdio."""

    def __init__(
        self,
        *,
        popen_factory: PopenFactory | None = None,
        base_env: Mapping[str, str] | None = None,
    ) -> None:
        self._popen_factory = popen_factory or subprocess.Popen
        self._base_env = base_env

    def launch(self, command: Command) -> ProcessHandle:
        env = dict(os.environ if self._base_env is None else self._base_env)
        env.update(command.env)
        try:
            return self._popen_factory(
                command.argv(),
                cwd=command.working_dir,
                env=env,
            )
        except FileNotFoundError as exc:
            raise LaunchError(f"Java executable not found: {command.executable}") from exc
        except OSError as exc:
            raise LaunchError(f"Failed to start game process: {exc}: {command.display()}") from exc
