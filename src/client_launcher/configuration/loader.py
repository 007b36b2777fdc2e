"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_LAUNCHER_NAME,
    DEFAULT_LAUNCHER_VERSION,
    GameSettings,
    JavaSettings,
    LauncherBrand,
    LauncherConfiguration,
    PlatformOverride,
    PlayerSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> LauncherConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return LauncherConfiguration(
        path=path,
        game=_parse_game_section(parsed.get("game"), path.parent),
        player=_parse_player_section(parsed.get("player")),
        java=_parse_java_section(parsed.get("java")),
        launcher=_parse_launcher_section(parsed.get("launcher")),
        platform=_parse_platform_section(parsed.get("platform")),
    )


def _parse_game_section(value: Any, base_path: Path) -> GameSettings:
    section = _require_mapping(value, "game")
    root_dir = _require_non_empty_string(section.get("root_dir"), "game.root_dir")
    version = _require_non_empty_string(section.get("version"), "game.version")
    return GameSettings(root_dir=_resolve_path(base_path, root_dir), version=version)


def _parse_player_section(value: Any) -> PlayerSettings:
    section = _require_mapping(value, "player")
    return PlayerSettings(name=_require_non_empty_string(section.get("name"), "player.name"))


def _parse_java_section(value: Any) -> JavaSettings:
    section = _optional_mapping(value, "java")
    path = _require_non_empty_string(section.get("path", "java"), "java.path")
    memory_mb = _require_non_negative_int(section.get("memory_mb", 4096), "java.memory_mb")
    use_system_memory = _require_bool(
        section.get("use_system_memory", False), "java.use_system_memory"
    )
    file_encoding = _require_non_empty_string(
        section.get("file_encoding", "UTF-8"), "java.file_encoding"
    )
    return JavaSettings(
        path=path,
        memory_mb=memory_mb,
        use_system_memory=use_system_memory,
        file_encoding=file_encoding,
    )


def _parse_launcher_section(value: Any) -> LauncherBrand:
    section = _optional_mapping(value, "launcher")
    return LauncherBrand(
        name=_require_non_empty_string(section.get("name", DEFAULT_LAUNCHER_NAME), "launcher.name"),
        version=_require_non_empty_string(
            section.get("version", DEFAULT_LAUNCHER_VERSION), "launcher.version"
        ),
    )


def _parse_platform_section(value: Any) -> PlatformOverride:
    section = _optional_mapping(value, "platform")
    return PlatformOverride(
        name=_optional_string(section.get("name"), "platform.name"),
        arch=_optional_string(section.get("arch"), "platform.arch"),
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
