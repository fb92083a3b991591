"""Canonical package identifiers of the form author.name."""

import re
from dataclasses import dataclass

from nex.core.errors import InvalidPackageIdError

_PART_PATTERN = re.compile(r"[a-z0-9-]+")


def is_valid_package_id(value: str) -> bool:
    """Check whether a string already has canonical author.name shape."""
    author, dot, name = value.partition(".")
    return bool(dot) and _PART_PATTERN.fullmatch(author) is not None and (
        _PART_PATTERN.fullmatch(name) is not None
    )


@dataclass(frozen=True)
class PackageId:
    """Primary key across the registry and all local stores."""

    author: str
    name: str

    @staticmethod
    def parse(value: str) -> "PackageId":
        """Parse and normalise an identifier.

        Both parts are lower-cased and must match [a-z0-9-]+.

        Raises:
            InvalidPackageIdError: If the value is not author.name shaped
        """
        candidate = value.strip().lower()
        if not is_valid_package_id(candidate):
            raise InvalidPackageIdError(value)
        author, _, name = candidate.partition(".")
        return PackageId(author=author, name=name)

    @property
    def shard(self) -> str:
        """One-letter registry shard: lower-cased first character of the author."""
        return self.author[0]

    def __str__(self) -> str:
        return f"{self.author}.{self.name}"
