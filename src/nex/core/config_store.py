"""Key/value configuration persisted in config.json."""

import logging
from pathlib import Path

from nex.core.errors import InvalidConfigValueError
from nex.core.json_store import load_json, save_json

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_URL = "https://raw.githubusercontent.com/nexhq/nex/main/registry"

ConfigValue = str | bool

# Known keys and a one-line description, in display order
KNOWN_KEYS: dict[str, str] = {
    "registry_url": "Custom registry URL",
    "global_path": "Path for global packages",
    "auto_update": "Auto-check for CLI updates (true/false)",
}

BOOLEAN_KEYS = frozenset({"auto_update"})
STRING_KEYS = frozenset({"registry_url", "global_path"})


def parse_config_value(key: str, raw: str) -> ConfigValue:
    """Convert a command-line value into a stored config value.

    "true" and "false" become booleans except for keys that hold strings;
    everything else stays a string.

    Raises:
        InvalidConfigValueError: If a boolean key receives a non-boolean value
    """
    if key in STRING_KEYS:
        return raw
    if raw == "true":
        return True
    if raw == "false":
        return False
    if key in BOOLEAN_KEYS:
        raise InvalidConfigValueError(f"Invalid boolean value for {key}: {raw}")
    return raw


def format_config_value(value: ConfigValue) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return value


class ConfigStore:
    """Reads and rewrites config.json.

    Unknown keys are accepted and preserved. Values other than strings and
    booleans are ignored on read.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, ConfigValue]:
        data = load_json(self._path)
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str | bool)}

    def get(self, key: str) -> ConfigValue | None:
        return self.load().get(key)

    def set(self, key: str, value: ConfigValue) -> None:
        data = self.load()
        data.pop(key, None)
        data[key] = value
        save_json(self._path, data)
        logger.debug("Set config %s=%r", key, value)

    def unset(self, key: str) -> bool:
        """Remove a key. Returns whether it was present."""
        data = self.load()
        if key not in data:
            return False
        del data[key]
        save_json(self._path, data)
        return True

    def registry_url(self) -> str:
        """Registry base URL, from config or the built-in default."""
        value = self.get("registry_url")
        if isinstance(value, str) and value:
            return value.rstrip("/")
        return DEFAULT_REGISTRY_URL
