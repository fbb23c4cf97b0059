"""Default configuration values for connswitch."""

lib_name = "connswitch"

CONFIG_FILE_ENV = "DBCONFIG_FILE"
CLIENT_ENV = "DB_CLIENT"
DEBUG_ENV = f"{lib_name.upper()}_DEBUG"

ENV_FILE = ".env"

# Probed in order when DBCONFIG_FILE is not set
CONFIG_CANDIDATES = [
    ".dbconfig.json",
    ".dbconfig.yaml",
    ".dbconfig.yml",
    ".dbconfig.ini",
]
