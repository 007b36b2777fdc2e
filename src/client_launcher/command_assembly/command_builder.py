"""JVM command line assembly service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from client_launcher.platform_targeting.platform_models import Platform

from .command_models import Command, LaunchOptions


def memory_flags(options: LaunchOptions) -> tuple[str, ...]:
    """Return heap flags unless the JVM should pick its own memory size."""
    if options.use_system_memory or options.memory_mb <= 0:
        return ()
    return (f"-Xmx{options.memory_mb}M", f"-Xms{options.memory_mb}M")


def fixed_jvm_flags(  # pylint: disable=too-many-arguments
    *,
    root_dir: Path,
    version_name: str,
    platform: Platform,
    options: LaunchOptions,
    launcher_name: str,
    launcher_version: str,
) -> tuple[str, ...]:
    """Return the JVM system properties and GC tuning passed on every launch."""
    version_dir = root_dir / "versions" / version_name
    natives_dir = version_dir / platform.natives_label
    return (
        f"-Dfile.encoding={options.file_encoding}",
        f"-Dsun.stdout.encoding={options.file_encoding}",
        f"-Dsun.stderr.encoding={options.file_encoding}",
        "-Djava.rmi.server.useCodebaseOnly=true",
        "-Dcom.sun.jndi.rmi.object.trustURLCodebase=false",
        "-Dcom.sun.jndi.cosnaming.object.trustURLCodebase=false",
        "-Dlog4j2.formatMsgNoLookups=true",
        f"-Dlog4j.configurationFile={version_dir / 'log4j2.xml'}",
        f"-Dminecraft.client.jar={version_dir / f'{version_name}.jar'}",
        "-XX:+UnlockExperimentalVMOptions",
        "-XX:+UseG1GC",
        "-XX:G1NewSizePercent=20",
        "-XX:G1ReservePercent=20",
        "-XX:MaxGCPauseMillis=50",
        "-XX:G1HeapRegionSize=32m",
        "-XX:-UseAdaptiveSizePolicy",
        "-XX:-OmitStackTraceInFastThrow",
        "-XX:-DontCompileHugeMethods",
        "-Dfml.ignoreInvalidMinecraftCertificates=true",
        "-Dfml.ignorePatchDiscrepancies=true",
        "-XX:HeapDumpPath=MojangTricksIntelDriversForPerformance_javaw.exe_minecraft.exe.heapdump",
        f"-Djava.library.path={natives_dir}",
        f"-Djna.tmpdir={natives_dir}",
        f"-Dorg.lwjgl.system.SharedLibraryExtractPath={natives_dir}",
        f"-Dio.netty.native.workdir={natives_dir}",
        f"-Dminecraft.launcher.brand={launcher_name}",
        f"-Dminecraft.launcher.version={launcher_version}",
    )


def build_command(  # pylint: disable=too-many-arguments
    *,
    root_dir: Path,
    version_name: str,
    main_class: str,
    search_path: str,
    game_arguments: Sequence[str],
    platform: Platform,
    options: LaunchOptions,
    launcher_name: str,
    launcher_version: str,
) -> Command:
    """Assemble `java [memory] [flags] -cp <search path> <main class> [game args]`."""
    args = (
        *memory_flags(options),
        *fixed_jvm_flags(
            root_dir=root_dir,
            version_name=version_name,
            platform=platform,
            options=options,
            launcher_name=launcher_name,
            launcher_version=launcher_version,
        ),
        "-cp",
        search_path,
        main_class,
        *game_arguments,
    )
    return Command(executable=options.java_path, args=args, working_dir=root_dir)
