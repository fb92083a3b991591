"""Resolution of user-supplied names to canonical package identifiers.

Sources are consulted in order:

1. Alias store (exact, case-sensitive shortcut lookup)
2. Pass-through for anything containing '.' (no registry request)
3. Registry index short-name lookup (case-insensitive)

Ambiguity is surfaced, never tie-broken.
"""

import logging

from nex.core.alias_store import AliasStore
from nex.core.errors import AmbiguousPackageError, PackageNotFoundError
from nex.core.registry import Registry

logger = logging.getLogger(__name__)


class Resolver:
    """Maps short names and aliases to author.name identifiers."""

    def __init__(self, aliases: AliasStore, registry: Registry) -> None:
        self._aliases = aliases
        self._registry = registry

    def resolve(self, name_or_id: str) -> str:
        """Resolve through aliases, pass-through, then the registry.

        Raises:
            PackageNotFoundError: If nothing matches
            AmbiguousPackageError: If several registry entries match
        """
        aliased = self._aliases.get(name_or_id)
        if aliased is not None:
            logger.debug("Alias hit: %s -> %s", name_or_id, aliased)
            return aliased

        return self.resolve_from_registry(name_or_id)

    def resolve_from_registry(self, name_or_id: str) -> str:
        """Resolve without consulting aliases."""
        if "." in name_or_id:
            return name_or_id

        wanted = name_or_id.lower()
        candidates: list[str] = []
        for entry in self._registry.fetch_index():
            short_match = entry.short_name is not None and entry.short_name.lower() == wanted
            id_match = entry.id_name_part is not None and entry.id_name_part.lower() == wanted
            if (short_match or id_match) and entry.id not in candidates:
                candidates.append(entry.id)

        logger.debug("Registry candidates for %s: %s", name_or_id, candidates)

        if not candidates:
            raise PackageNotFoundError(name_or_id)
        if len(candidates) > 1:
            raise AmbiguousPackageError(name_or_id, candidates)
        return candidates[0]
