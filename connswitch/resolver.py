"""Work out which connection is active."""

from __future__ import annotations

import copy
from typing import Any, Mapping

from connswitch.config import get_client_override
from connswitch.constants import CLIENT_ENV
from connswitch.exceptions import UnknownClient
from connswitch.log import log
from connswitch.models import ACTIVE, ClientRecord, ConfigModel


def _entry(key: str, record: ClientRecord) -> dict[str, Any]:
    return {"key": key, **copy.deepcopy(record.to_dict())}


def get_active(
    model: ConfigModel, env: Mapping[str, str] | None = None
) -> dict[str, Any] | None:
    """
    Return the active connection as ``{"key": ..., **fields}``.

    - DB_CLIENT, when set, wins and must name an existing client.
    - Otherwise the first client flagged active, in file order.
    - None when nothing is active.
    """
    override = get_client_override(env)
    if override:
        record = model.clients.get(override)
        if record is None:
            available = model.keys()
            raise UnknownClient(
                f'{CLIENT_ENV}="{override}" does not match any client in config. '
                f"Available clients: {', '.join(available)}",
                key=override,
                available=available,
            )
        log.debug(f"Active connection forced by {CLIENT_ENV}: {override}")
        return _entry(override, record)

    actives = [key for key, record in model.clients.items() if record.is_active]
    if not actives:
        return None
    if len(actives) > 1:
        log.debug(f"Several clients marked active ({', '.join(actives)}); using {actives[0]}")
    return _entry(actives[0], model.clients[actives[0]])


def list_clients(model: ConfigModel) -> list[dict[str, Any]]:
    """Every client in file order, with ``active`` recomputed as a bool."""
    return [
        {**_entry(key, record), ACTIVE: record.is_active}
        for key, record in model.clients.items()
    ]


def get_by_key(model: ConfigModel, key: str) -> dict[str, Any] | None:
    record = model.clients.get(key)
    if record is None:
        return None
    return _entry(key, record)
