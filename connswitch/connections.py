"""Public operations. Each call re-reads the config file from disk."""

from __future__ import annotations

from typing import Any

from connswitch.constants import CONFIG_FILE_ENV
from connswitch.exceptions import ConfigNotFound, InvalidArgument
from connswitch.loader import load_config, save_config
from connswitch.locator import find_config_file
from connswitch.log import log
from connswitch.models import LoadedConfig
from connswitch import resolver, writer


def _load() -> LoadedConfig:
    path = find_config_file()
    if path is None:
        raise ConfigNotFound(
            "Config file not found. Create .dbconfig.json/.yaml/.ini in your "
            f"project root or set {CONFIG_FILE_ENV} environment variable."
        )
    return load_config(path)


def _check_key(key: Any) -> None:
    if not key or not isinstance(key, str):
        raise InvalidArgument("Key must be a non-empty string")


def get_active_connection() -> dict[str, Any] | None:
    """
    Get the active connection.

    - If DB_CLIENT is set, that client is returned (the file is not modified).
    - Else the first client with active=true.
    - Else None.
    """
    return resolver.get_active(_load().model)


def list_connections() -> list[dict[str, Any]]:
    """All connections as ``{"key", "connectionString", "active", ...}`` dicts."""
    return resolver.list_clients(_load().model)


def get_connection_by_key(key: str) -> dict[str, Any] | None:
    """Look up a connection without touching the active state."""
    _check_key(key)
    return resolver.get_by_key(_load().model, key)


def set_active_connection(key: str) -> bool:
    """
    Persist ``key`` as the only active connection.

    DB_CLIENT is a runtime override and is ignored here.
    """
    _check_key(key)
    loaded = _load()
    model = writer.set_active(loaded.model, key)
    save_config(loaded.path, loaded.kind, model)
    log.debug(f"Active connection set to {key} in {loaded.path}")
    return True
