"""Validate a decoded config structure and coerce it into a ConfigModel."""

from __future__ import annotations

from typing import Any

from connswitch.codecs import Format
from connswitch.exceptions import InvalidConfig
from connswitch.models import ACTIVE, CONNECTION_STRING, ClientRecord, ConfigModel

_TRUE_STRINGS = {"true", "1", "yes"}


def validate_connection_string(value: Any, key: str) -> None:
    if not value or not isinstance(value, str):
        raise InvalidConfig(
            f'Client "{key}": connectionString must be a non-empty string',
            client_key=key,
        )
    if not value.strip():
        raise InvalidConfig(
            f'Client "{key}": connectionString cannot be empty or whitespace',
            client_key=key,
        )


def coerce_active(value: Any) -> bool:
    """Coerce a stored ``active`` value to a bool.

    "true"/"1"/"yes" (any case) are true and other strings false; numbers
    are true when non-zero; everything else uses plain truthiness.
    """
    if isinstance(value, str):
        return value.lower() in _TRUE_STRINGS
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return bool(value)


def _client_mapping(raw: dict[str, Any], kind: Format) -> Any:
    if kind is Format.INI:
        return raw
    # JSON/YAML without a "clients" wrapper: top-level entries are clients
    if "clients" in raw:
        return raw["clients"]
    return raw


def normalize(raw: Any, kind: Format | str) -> ConfigModel:
    """
    Convert a decoded document into the canonical model.

    Raises InvalidConfig on structural problems. Client order follows the
    source document.
    """
    kind = Format(kind)
    if not isinstance(raw, dict):
        raise InvalidConfig("Config file must contain a valid object")

    clients = _client_mapping(raw, kind)
    if not isinstance(clients, dict) or not clients:
        raise InvalidConfig("Config must contain at least one client definition")

    model = ConfigModel()
    for key, value in clients.items():
        key = str(key)
        if not isinstance(value, dict):
            raise InvalidConfig(
                f'Client "{key}" must be an object with at least a connectionString field',
                client_key=key,
            )

        fields = dict(value)
        validate_connection_string(fields.get(CONNECTION_STRING), key)
        if ACTIVE in fields:
            fields[ACTIVE] = coerce_active(fields[ACTIVE])

        model.clients[key] = ClientRecord(fields)

    return model
