"""Client for the remote package registry.

Registry layout (relative to the base URL):

    index.json                                      {"packages": [...]}
    packages/<l>/<author>/<name>/manifest.json      per-package manifest

where <l> is the lower-cased first character of the author.
"""

import json
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from nex.core.errors import HttpStatusError, PackageNotFoundError, RegistryParseError
from nex.core.http.abc import HttpFetcher
from nex.core.package_id import PackageId

logger = logging.getLogger(__name__)


class RegistryIndexEntry(BaseModel):
    """One package listed in index.json."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    short_name: str | None = Field(default=None, alias="shortName")
    name: str | None = None
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)

    @property
    def id_name_part(self) -> str | None:
        """Part of the id after the first '.', or None for malformed ids."""
        _, dot, name = self.id.partition(".")
        return name if dot else None

    def matches_query(self, query: str) -> bool:
        """Case-insensitive substring match over id, names, description and keywords."""
        needle = query.lower()
        haystack = [self.id, self.short_name, self.name, self.description, *self.keywords]
        return any(needle in field.lower() for field in haystack if field)


class Registry:
    """Fetches the registry index and per-package manifests."""

    def __init__(self, base_url: str, http: HttpFetcher) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def index_url(self) -> str:
        return f"{self._base_url}/index.json"

    def manifest_url(self, package_id: PackageId) -> str:
        return (
            f"{self._base_url}/packages/{package_id.shard}/"
            f"{package_id.author}/{package_id.name}/manifest.json"
        )

    def fetch_index(self) -> list[RegistryIndexEntry]:
        """Fetch and parse index.json.

        Entries without a usable id are skipped.

        Raises:
            TransportError: If the request fails to complete
            HttpStatusError: If the registry answers non-2xx
            RegistryParseError: If the document has no packages array
        """
        url = self.index_url
        response = self._http.get(url)
        if not response.ok:
            raise HttpStatusError(
                url,
                response.status_code,
                f"Failed to fetch registry (HTTP {response.status_code})",
            )

        try:
            data = json.loads(response.content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RegistryParseError(f"Failed to parse registry index: {e}") from e

        packages = data.get("packages") if isinstance(data, dict) else None
        if not isinstance(packages, list):
            raise RegistryParseError("Invalid registry format: missing 'packages' array")

        entries: list[RegistryIndexEntry] = []
        for i, item in enumerate(packages):
            try:
                entries.append(RegistryIndexEntry.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid registry entry at index %d: %s", i, e)
        logger.debug("Registry index has %d entries", len(entries))
        return entries

    def fetch_manifest_bytes(self, package_id: PackageId) -> bytes:
        """Fetch the raw manifest document for a package.

        Raises:
            TransportError: If the request fails to complete
            PackageNotFoundError: If the registry answers 404
            HttpStatusError: If the registry answers any other non-2xx
        """
        url = self.manifest_url(package_id)
        response = self._http.get(url)
        if response.status_code == 404:
            raise PackageNotFoundError(str(package_id))
        if not response.ok:
            raise HttpStatusError(
                url,
                response.status_code,
                f"Failed to fetch manifest for {package_id} (HTTP {response.status_code})",
            )
        return response.content

    def search(self, query: str) -> list[RegistryIndexEntry]:
        """Index entries matching a query by id, name, description or keyword."""
        return [entry for entry in self.fetch_index() if entry.matches_query(query)]
