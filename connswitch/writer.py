from __future__ import annotations

from connswitch.exceptions import UnknownClient
from connswitch.models import ConfigModel


def set_active(model: ConfigModel, key: str) -> ConfigModel:
    """Return a copy of ``model`` where ``key`` is the only active client.

    Every other client gets an explicit ``active: false`` so files with zero
    or several active entries come out consistent.
    """
    if key not in model.clients:
        available = model.keys()
        raise UnknownClient(
            f'Key "{key}" not found in config. '
            f"Available clients: {', '.join(available)}",
            key=key,
            available=available,
        )

    return ConfigModel(
        clients={
            name: record.with_active(name == key)
            for name, record in model.clients.items()
        }
    )
