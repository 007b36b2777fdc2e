"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LAUNCHER_NAME = "client-launcher"
DEFAULT_LAUNCHER_VERSION = "0.1.0"


@dataclass(frozen=True)
class GameSettings:
    """Game directory and the version to launch from it."""

    root_dir: Path
    version: str


@dataclass(frozen=True)
class PlayerSettings:
    """Offline player identity."""

    name: str


@dataclass(frozen=True)
class JavaSettings:
    """Java interpreter configuration."""

    path: str
    memory_mb: int
    use_system_memory: bool
    file_encoding: str


@dataclass(frozen=True)
class LauncherBrand:
    """Launcher name and version reported to the game."""

    name: str = DEFAULT_LAUNCHER_NAME
    version: str = DEFAULT_LAUNCHER_VERSION

    @property
    def version_type(self) -> str:
        return f"{self.name} {self.version}"


@dataclass(frozen=True)
class PlatformOverride:
    """Optional replacement for the detected host platform."""

    name: str | None = None
    arch: str | None = None


@dataclass(frozen=True)
class LauncherConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    game: GameSettings
    player: PlayerSettings
    java: JavaSettings
    launcher: LauncherBrand
    platform: PlatformOverride
