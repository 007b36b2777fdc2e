"""Runtime substitution values for one launch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PLACEHOLDER_UUID = "00000000-0000-0000-0000-000000000000"
PLACEHOLDER_ACCESS_TOKEN = "00000000000000000000000000000000"
PLACEHOLDER_USER_TYPE = "legacy"


@dataclass(frozen=True)
class RuntimeContext:  # pylint: disable=too-many-instance-attributes
    """Values substituted into argument templates."""

    player_name: str
    version_id: str
    game_directory: Path
    assets_directory: Path
    assets_index_id: str
    libraries_directory: Path
    version_type: str
    auth_uuid: str = PLACEHOLDER_UUID
    auth_access_token: str = PLACEHOLDER_ACCESS_TOKEN
    user_type: str = PLACEHOLDER_USER_TYPE

    def replacements(self) -> dict[str, str]:
        """Return placeholder names mapped to their values, in substitution order."""
        return {
            "auth_player_name": self.player_name,
            "version_name": self.version_id,
            "game_directory": str(self.game_directory),
            "assets_root": str(self.assets_directory),
            "assets_index_name": self.assets_index_id,
            "auth_uuid": self.auth_uuid,
            "auth_access_token": self.auth_access_token,
            "user_type": self.user_type,
            "version_type": self.version_type,
            "library_directory": str(self.libraries_directory),
            "user_properties": "{}",
        }
