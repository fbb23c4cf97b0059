"""Normalized in-memory model of a connections config file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from connswitch.codecs import Format

CONNECTION_STRING = "connectionString"
ACTIVE = "active"


@dataclass
class ClientRecord:
    """One named connection entry.

    ``fields`` holds the record exactly as it appears in the file (after
    coercion of ``active``), so unknown keys and their order survive a save.
    """

    fields: dict[str, Any]

    @property
    def active(self) -> bool | None:
        return self.fields.get(ACTIVE)

    @property
    def is_active(self) -> bool:
        return bool(self.fields.get(ACTIVE))

    def with_active(self, active: bool) -> "ClientRecord":
        fields = dict(self.fields)
        fields[ACTIVE] = active
        return ClientRecord(fields)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.fields)


@dataclass
class ConfigModel:
    clients: dict[str, ClientRecord] = field(default_factory=dict)

    def keys(self) -> list[str]:
        return list(self.clients)

    def to_dict(self) -> dict[str, Any]:
        return {
            "clients": {key: record.to_dict() for key, record in self.clients.items()}
        }


@dataclass
class LoadedConfig:
    """A model tagged with the file and format it was read from."""

    path: Path
    kind: Format
    model: ConfigModel
