"""Command entities handed to the process launcher."""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LaunchOptions:
    """Interpreter settings for one launch."""

    java_path: str = "java"
    memory_mb: int = 4096
    use_system_memory: bool = False
    file_encoding: str = "UTF-8"


@dataclass(frozen=True)
class Command:
    """Executable plus discrete argument tokens."""

    executable: str
    args: tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)
    working_dir: Path | None = None

    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    def display(self) -> str:
        """Render a shell-quoted form for logs and terminals."""
        return shlex.join(self.argv())
