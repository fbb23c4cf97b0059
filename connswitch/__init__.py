from .config import load_env_file
from .connections import (
    get_active_connection,
    get_connection_by_key,
    list_connections,
    set_active_connection,
)
from .exceptions import (
    ConfigNotFound,
    ConfigWriteError,
    ConnSwitchError,
    InvalidArgument,
    InvalidConfig,
    ParseError,
    UnknownClient,
    UnsupportedFormat,
)

__version__ = "1.0.0"

# DB_CLIENT / DBCONFIG_FILE may come from ./.env; the shell still wins
load_env_file()

__all__ = [
    "ConfigNotFound",
    "ConfigWriteError",
    "ConnSwitchError",
    "InvalidArgument",
    "InvalidConfig",
    "ParseError",
    "UnknownClient",
    "UnsupportedFormat",
    "get_active_connection",
    "get_connection_by_key",
    "list_connections",
    "set_active_connection",
]
