"""Package manifest model and parsing.

A manifest is the per-package JSON document published in the registry and
snapshotted into packages/<id>/manifest.json on install.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from nex.core.errors import ManifestParseError
from nex.core.package_id import is_valid_package_id
from nex.core.runtime import RuntimeType, parse_runtime_type

DEFAULT_COMMAND = "default"
INSTALL_COMMAND = "install"


class ManifestRuntime(BaseModel):
    """Runtime declaration: a runtime tag plus an optional version."""

    model_config = ConfigDict(frozen=True)

    type: RuntimeType = RuntimeType.UNKNOWN
    version: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> RuntimeType:
        if isinstance(v, RuntimeType):
            return v
        if v is None or isinstance(v, str):
            return parse_runtime_type(v)
        raise ValueError("runtime type must be a string")


class PackageManifest(BaseModel):
    """Parsed package manifest.

    Required: id, version, repository. name defaults to id, other optional
    fields default to empty. Unknown fields are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    repository: str = Field(..., min_length=1)
    name: str = ""
    description: str = ""
    author: str = ""
    license: str = ""
    entrypoint: str = ""
    keywords: list[str] = Field(default_factory=list)
    runtime: ManifestRuntime = Field(default_factory=ManifestRuntime)
    commands: dict[str, str] = Field(default_factory=dict)
    schema_url: str | None = Field(default=None, alias="$schema")

    @model_validator(mode="before")
    @classmethod
    def default_name_to_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("name"):
            return {**data, "name": data.get("id")}
        return data

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        normalized = v.strip().lower()
        if not is_valid_package_id(normalized):
            raise ValueError(f"'{v}' is not a valid author.package-name identifier")
        return normalized

    @field_validator("author", mode="before")
    @classmethod
    def normalize_author(cls, v: Any) -> str:
        """Accept either a bare string or an object {name, github}."""
        if v is None:
            return ""
        if isinstance(v, str):
            return v
        if isinstance(v, dict):
            for key in ("name", "github"):
                value = v.get(key)
                if isinstance(value, str) and value:
                    return value
            return ""
        raise ValueError("author must be a string or an object with name/github")

    @field_validator("runtime", mode="before")
    @classmethod
    def normalize_runtime(cls, v: Any) -> Any:
        if v is None:
            return ManifestRuntime()
        if isinstance(v, str):
            return {"type": v}
        return v

    @field_validator("name", "description", "license", "entrypoint", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def runtime_type(self) -> RuntimeType:
        return self.runtime.type

    @property
    def install_command(self) -> str | None:
        return self.commands.get(INSTALL_COMMAND)


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ManifestParseError(f"Manifest contains duplicate key '{key}'")
        result[key] = value
    return result


def _format_validation_error(error: ValidationError) -> str:
    details = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "(root)"
        details.append(f"{location}: {err['msg']}")
    return "; ".join(details)


def parse_manifest(raw: bytes | str) -> PackageManifest:
    """Parse and validate a manifest document.

    Raises:
        ManifestParseError: If the JSON is malformed, has duplicate keys, is
            missing required fields, or holds values of the wrong type
    """
    try:
        data = json.loads(raw, object_pairs_hook=_reject_duplicate_keys)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(f"Failed to parse manifest JSON: {e}") from e

    if not isinstance(data, dict):
        raise ManifestParseError("Manifest must be a JSON object")

    try:
        return PackageManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(f"Invalid manifest: {_format_validation_error(e)}") from e
