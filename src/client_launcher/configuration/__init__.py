"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    GameSettings,
    JavaSettings,
    LauncherBrand,
    LauncherConfiguration,
    PlatformOverride,
    PlayerSettings,
)

__all__ = [
    "GameSettings",
    "JavaSettings",
    "LauncherBrand",
    "LauncherConfiguration",
    "PlatformOverride",
    "PlayerSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
