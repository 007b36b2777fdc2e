"""Launch execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from client_launcher.command_assembly.command_models import Command
from client_launcher.dependency_resolution.resolution_outcomes import DependencyResolution
from client_launcher.descriptor_loading.descriptor_models import Descriptor
from client_launcher.platform_targeting.platform_models import Platform


@dataclass(frozen=True)
class LaunchRequest:
    """Input contract for resolving or launching one version."""

    config_path: str
    version: str | None = None
    player_name: str | None = None


@dataclass(frozen=True)
class ResolvedLaunch:
    """Everything derived from the descriptor before a process is started."""

    descriptor: Descriptor
    platform: Platform
    dependencies: DependencyResolution
    game_arguments: tuple[str, ...]
    command: Command


@dataclass(frozen=True)
class LaunchOutcome:
    """Output contract for one started game process."""

    pid: int
    command: Command
