"""Find the config file that governs the working directory."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from connswitch.config import get_config_file_override
from connswitch.constants import CONFIG_CANDIDATES, CONFIG_FILE_ENV
from connswitch.exceptions import ConfigNotFound
from connswitch.log import log


def find_config_file(
    cwd: Path | None = None, env: Mapping[str, str] | None = None
) -> Path | None:
    """
    Return the config file path, or None when no candidate exists.

    Priority:
      1) DBCONFIG_FILE (absolute or relative to cwd); must exist
      2) .dbconfig.json / .yaml / .yml / .ini in cwd
    """
    base = Path(cwd) if cwd is not None else Path.cwd()

    override = get_config_file_override(env)
    if override:
        resolved = (base / Path(override).expanduser()).resolve()
        if resolved.exists():
            log.debug(f"Using {CONFIG_FILE_ENV}: {resolved}")
            return resolved
        raise ConfigNotFound(
            f"{CONFIG_FILE_ENV} specified but not found: {resolved}", path=resolved
        )

    for candidate in CONFIG_CANDIDATES:
        path = (base / candidate).resolve()
        if path.exists():
            log.debug(f"Found config file: {path}")
            return path

    return None
