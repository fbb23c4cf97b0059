from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

from connswitch.constants import CLIENT_ENV, CONFIG_FILE_ENV, DEBUG_ENV, ENV_FILE


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if env is None else env


def get_config_file_override(env: Mapping[str, str] | None = None) -> str | None:
    return _environ(env).get(CONFIG_FILE_ENV) or None


def get_client_override(env: Mapping[str, str] | None = None) -> str | None:
    return _environ(env).get(CLIENT_ENV) or None


def debug_enabled() -> bool:
    return bool(os.getenv(DEBUG_ENV))


def load_env_file(path: Path | None = None) -> bool:
    """Populate DBCONFIG_FILE / DB_CLIENT from a local .env file.

    Variables already exported by the shell win over the file.
    """
    env_path = path or Path.cwd() / ENV_FILE
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)
