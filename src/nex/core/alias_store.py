"""User-defined package shortcuts persisted in aliases.json."""

import logging
from pathlib import Path

from nex.core.errors import InvalidAliasError
from nex.core.json_store import load_json, save_json

logger = logging.getLogger(__name__)


def validate_shortcut(shortcut: str) -> None:
    """Validate an alias shortcut.

    Raises:
        InvalidAliasError: If the shortcut is empty or contains '.'
    """
    if not shortcut:
        raise InvalidAliasError("Alias cannot be empty")
    if "." in shortcut:
        raise InvalidAliasError("Alias cannot contain '.' character")


class AliasStore:
    """Maps shortcuts to package identifiers. Lookups are case-sensitive."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> dict[str, str]:
        data = load_json(self._path)
        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def get(self, shortcut: str) -> str | None:
        return self.load().get(shortcut)

    def set(self, shortcut: str, package_id: str) -> None:
        validate_shortcut(shortcut)
        aliases = self.load()
        aliases.pop(shortcut, None)
        aliases[shortcut] = package_id
        save_json(self._path, aliases)
        logger.debug("Alias %s -> %s", shortcut, package_id)

    def remove(self, shortcut: str) -> bool:
        """Remove a shortcut. Returns whether it existed."""
        aliases = self.load()
        if shortcut not in aliases:
            return False
        del aliases[shortcut]
        save_json(self._path, aliases)
        return True
