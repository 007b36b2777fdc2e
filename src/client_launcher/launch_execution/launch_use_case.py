"""Launch execution use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from client_launcher.argument_composition import RuntimeContext, compose_arguments
from client_launcher.command_assembly import LaunchOptions, build_command
from client_launcher.configuration import (
    ConfigurationError,
    LauncherConfiguration,
    PlatformOverride,
    load_configuration,
)
from client_launcher.dependency_resolution import (
    DependencyResolution,
    MissingRequiredFieldError,
    SkipReason,
    join_search_path,
    resolve_dependency_paths,
)
from client_launcher.dependency_resolution.dependency_resolver import ExistenceCheck
from client_launcher.descriptor_loading import Descriptor, DescriptorLoadError, load_descriptor
from client_launcher.platform_targeting import Platform, detect_platform
from client_launcher.process_launching import (
    LaunchError,
    ProcessLauncher,
    SubprocessProcessLauncher,
)

from .launch_contracts import LaunchOutcome, LaunchRequest, ResolvedLaunch

logger = logging.getLogger(__name__)

DescriptorLoader = Callable[[Path, str], Descriptor]


class LaunchExecutionError(Exception):
    """Raised when a launch cannot be resolved or started."""


def resolve_launch(
    request: LaunchRequest,
    *,
    load: DescriptorLoader | None = None,
    exists: ExistenceCheck | None = None,
    host_platform: Platform | None = None,
) -> ResolvedLaunch:
    """Resolve the command for one launch request without starting anything."""
    descriptor_loader = load or load_descriptor
    try:
        configuration = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise LaunchExecutionError(str(exc)) from exc

    root_dir = configuration.game.root_dir
    version_name = request.version or configuration.game.version
    platform = _target_platform(configuration.platform, host_platform or detect_platform())
    try:
        descriptor = descriptor_loader(root_dir, version_name)
        dependencies = resolve_dependency_paths(descriptor, platform, root_dir, exists=exists)
    except (DescriptorLoadError, MissingRequiredFieldError) as exc:
        raise LaunchExecutionError(str(exc)) from exc
    _log_skipped_dependencies(dependencies)

    context = _runtime_context(
        configuration, descriptor, player_name=request.player_name, version_name=version_name
    )
    game_arguments = compose_arguments(descriptor, context)
    # resolve_dependency_paths has already rejected a missing main class.
    main_class = descriptor.main_class or ""
    command = build_command(
        root_dir=root_dir,
        version_name=version_name,
        main_class=main_class,
        search_path=join_search_path(dependencies.paths),
        game_arguments=game_arguments,
        platform=platform,
        options=_launch_options(configuration),
        launcher_name=configuration.launcher.name,
        launcher_version=configuration.launcher.version,
    )
    logger.debug("Resolved launch command: %s", command.display())
    return ResolvedLaunch(
        descriptor=descriptor,
        platform=platform,
        dependencies=dependencies,
        game_arguments=game_arguments,
        command=command,
    )


def execute_launch(
    request: LaunchRequest,
    *,
    launcher: ProcessLauncher | None = None,
    load: DescriptorLoader | None = None,
    exists: ExistenceCheck | None = None,
    host_platform: Platform | None = None,
) -> LaunchOutcome:
    """Resolve the launch request and start the game process."""
    resolved = resolve_launch(request, load=load, exists=exists, host_platform=host_platform)
    process_launcher = launcher or SubprocessProcessLauncher()
    try:
        handle = process_launcher.launch(resolved.command)
    except LaunchError as exc:
        raise LaunchExecutionError(str(exc)) from exc
    logger.info("Started %s with PID %s", resolved.descriptor.version_id, handle.pid)
    return LaunchOutcome(pid=handle.pid, command=resolved.command)


def _target_platform(override: PlatformOverride, detected: Platform) -> Platform:
    return Platform(
        name=override.name or detected.name,
        arch=override.arch or detected.arch,
    )


def _runtime_context(
    configuration: LauncherConfiguration,
    descriptor: Descriptor,
    *,
    player_name: str | None,
    version_name: str,
) -> RuntimeContext:
    root_dir = configuration.game.root_dir
    return RuntimeContext(
        player_name=player_name or configuration.player.name,
        version_id=version_name,
        game_directory=root_dir,
        assets_directory=root_dir / "assets",
        assets_index_id=descriptor.assets_index_id or "",
        libraries_directory=root_dir / "libraries",
        version_type=configuration.launcher.version_type,
    )


def _launch_options(configuration: LauncherConfiguration) -> LaunchOptions:
    return LaunchOptions(
        java_path=configuration.java.path,
        memory_mb=configuration.java.memory_mb,
        use_system_memory=configuration.java.use_system_memory,
        file_encoding=configuration.java.file_encoding,
    )


def _log_skipped_dependencies(dependencies: DependencyResolution) -> None:
    for skipped in dependencies.skipped:
        if skipped.reason == SkipReason.EXCLUDED_BY_RULES:
            logger.debug("Dependency %s excluded by platform rules", skipped.coordinate)
        else:
            logger.warning(
                "Skipping dependency %s (%s): %s",
                skipped.coordinate,
                skipped.reason.value,
                skipped.detail,
            )
