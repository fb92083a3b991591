"""Index of installed packages persisted in installed.json.

The index accelerates enumeration; the presence of packages/<id>/ remains
the authoritative proof of installation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from nex.core.json_store import load_json, save_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalInstallation:
    """One installed package."""

    id: str
    version: str
    install_path: Path
    is_installed: bool = True

    def to_json(self) -> dict[str, object]:
        return {
            "id": self.id,
            "version": self.version,
            "install_path": str(self.install_path),
            "is_installed": self.is_installed,
        }


def _parse_record(record: object) -> LocalInstallation | None:
    if not isinstance(record, dict):
        return None
    package_id = record.get("id")
    install_path = record.get("install_path")
    if not isinstance(package_id, str) or not isinstance(install_path, str):
        return None
    version = record.get("version")
    return LocalInstallation(
        id=package_id,
        version=version if isinstance(version, str) else "",
        install_path=Path(install_path),
        is_installed=bool(record.get("is_installed", True)),
    )


class InstalledStore:
    """Reads and rewrites installed.json."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> list[LocalInstallation]:
        data = load_json(self._path)
        if not isinstance(data, list):
            return []

        records: list[LocalInstallation] = []
        for item in data:
            parsed = _parse_record(item)
            if parsed is None:
                logger.debug("Skipping malformed installed.json entry: %r", item)
                continue
            records.append(parsed)
        return records

    def get(self, package_id: str) -> LocalInstallation | None:
        for record in self.load():
            if record.id == package_id:
                return record
        return None

    def upsert(self, installation: LocalInstallation) -> None:
        """Replace the record with the same id, or append a new one."""
        records: list[LocalInstallation] = []
        replaced = False
        for record in self.load():
            if record.id != installation.id:
                records.append(record)
            elif not replaced:
                records.append(installation)
                replaced = True
        if not replaced:
            records.append(installation)
        self._save(records)

    def remove(self, package_id: str) -> bool:
        """Drop the record for an id. Returns whether one was present."""
        records = self.load()
        kept = [r for r in records if r.id != package_id]
        if len(kept) == len(records):
            return False
        self._save(kept)
        return True

    def _save(self, records: list[LocalInstallation]) -> None:
        save_json(self._path, [r.to_json() for r in records])
