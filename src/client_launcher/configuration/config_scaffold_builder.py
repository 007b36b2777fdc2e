"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "launcher.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Launcher configuration template for client-launcher.
# Replace every <REQUIRED> placeholder before running resolve or launch.
# Optional keys may be removed; the documented defaults then apply.

game:
  # Game directory holding versions/, libraries/ and assets/.
  # Relative paths are resolved against this file's directory.
  root_dir: "<REQUIRED>"
  # Version folder name, e.g. 1.20.1 for versions/1.20.1/1.20.1.json.
  version: "<REQUIRED>"

player:
  name: "<REQUIRED>"

java:
  path: "java"
  memory_mb: 4096
  use_system_memory: false
  file_encoding: "UTF-8"

launcher:
  name: "client-launcher"
  version: "0.1.0"

# Uncomment to resolve for another platform than the host.
# platform:
#   name: "windows"
#   arch: "x86_64"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML launcher configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder launcher configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(
            f"Launcher configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
