from __future__ import annotations
from pathlib import Path
import fcntl
from typing import Any, Dict
import yaml

from modmail_embeds.util.logger import get_logger
from modmail_embeds.util.parsing_utils import parse_custom_boolean

logger = get_logger("app_configuration")


CONFIG_PATH = Path("./config/config.yml").resolve()

# Host configuration section holding the plugin's setting overrides
EMBED_SECTION_KEY = "em"
DEFAULT_FALLBACK_ROLE_NAME = "Staff"


def as_token(value: Any) -> Any:
    """Turn YAML integer scalars back into the text the user wrote.

    YAML loads an unquoted ``1`` or ``0`` as an int; the switch tokens are
    matched as strings.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class AppConfig:
    """File-lock based accessor around the host's YAML configuration.

    The plugin only reads three keys from it: the global ``threadTimestamps``
    switch, the ``fallbackRoleName`` used for staff without a role, and the
    ``em`` section of embed setting overrides.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._data: Dict[str, Any] = {}
        self.reload()

    # --------------------------
    # Private helpers
    # --------------------------
    def load_from_disk(self) -> Dict[str, Any]:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                data = yaml.safe_load(f)
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except FileNotFoundError:
            logger.error("[APP CONFIGURATION] Config file %s not found.", self.config_path)
            return {}
        except (OSError, yaml.YAMLError) as exc:
            logger.error("[APP CONFIGURATION] Failed to load config %s: %s", self.config_path, exc)
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error("[APP CONFIGURATION] Config %s is not a mapping, ignoring it.", self.config_path)
            return {}
        return data

    # --------------------------
    # Public API
    # --------------------------
    def reload(self) -> Dict[str, Any]:
        """Reload configuration from disk and return the loaded mapping.

        Returns the raw mapping that was loaded (an empty dict on error).
        """
        self._data = self.load_from_disk()
        return self._data

    # --------------------------
    # High-level shortcuts
    # --------------------------
    @property
    def thread_timestamps(self) -> bool:
        """Return the global ``threadTimestamps`` switch (default ``False``)."""
        value = as_token(self._data.get("threadTimestamps", False))
        parsed = parse_custom_boolean(value)
        if parsed is None:
            logger.warning("[APP CONFIGURATION] Value %s is not a valid truthy or falsy value for threadTimestamps", value)
            return False
        return parsed

    @property
    def fallback_role_name(self) -> str:
        """Return the role name shown for staff replies without a role."""
        value = self._data.get("fallbackRoleName")
        return str(value) if value else DEFAULT_FALLBACK_ROLE_NAME

    @property
    def embed_overrides(self) -> Dict[str, Any]:
        """Return the ``em`` section of setting overrides (or an empty dict)."""
        section = self._data.get(EMBED_SECTION_KEY, {})
        if section is None:
            return {}
        if not isinstance(section, dict):
            logger.warning("[APP CONFIGURATION] Section %r must be a mapping, ignoring it.", EMBED_SECTION_KEY)
            return {}
        return {name: as_token(value) for name, value in section.items()}
