"""Read, parse and persist config files."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from connswitch.codecs import Format, decode, detect_kind, encode
from connswitch.exceptions import (
    ConfigNotFound,
    ConfigWriteError,
    ParseError,
    UnsupportedFormat,
)
from connswitch.log import log
from connswitch.models import ConfigModel, LoadedConfig
from connswitch.normalize import normalize


def read_config_text(path: Path, kind: Format) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(
            f"Failed to parse {kind.value.upper()} config file {path}: "
            f"not valid UTF-8 ({exc})",
            kind=kind.value,
            original=exc,
        ) from exc
    except FileNotFoundError as exc:
        raise ConfigNotFound(f"Config file not found: {path}", path=path) from exc
    except PermissionError as exc:
        raise ConfigNotFound(
            f"Permission denied reading file: {path}", path=path
        ) from exc
    except IsADirectoryError as exc:
        raise ConfigNotFound(
            f"Expected a file but found a directory: {path}", path=path
        ) from exc
    except OSError as exc:
        raise ConfigNotFound(f"Error reading file {path}: {exc}", path=path) from exc


def write_config_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one step.

    The text goes to a temporary sibling first and is moved over the target
    with ``os.replace``, so the file is never left half-written.
    """
    if path.is_dir():
        raise ConfigWriteError(f"Cannot write to a directory: {path}", path=path)
    if not path.parent.is_dir():
        raise ConfigWriteError(
            f"Directory does not exist for file: {path}", path=path
        )

    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(content)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except PermissionError as exc:
        raise ConfigWriteError(
            f"Permission denied writing file: {path}", path=path, original=exc
        ) from exc
    except OSError as exc:
        raise ConfigWriteError(
            f"Error writing file {path}: {exc}", path=path, original=exc
        ) from exc
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def load_config(path: str | Path) -> LoadedConfig:
    """Load and normalize the config file at ``path``, remembering its format."""
    path = Path(path)
    kind = detect_kind(path)
    if kind is None:
        raise UnsupportedFormat(
            "Cannot infer config format from file extension. "
            "Use .json, .yaml, .yml, or .ini",
            path=path,
        )

    text = read_config_text(path, kind)
    model = normalize(decode(text, kind), kind)
    log.debug(f"Loaded {len(model.clients)} client(s) from {path} ({kind.value})")
    return LoadedConfig(path=path, kind=kind, model=model)


def save_config(path: str | Path, kind: Format | str, model: ConfigModel) -> None:
    """Serialize ``model`` with the format it was loaded with and overwrite ``path``."""
    path = Path(path)
    content = encode(model.to_dict(), kind)
    write_config_text(path, content)
    log.debug(f"Saved {len(model.clients)} client(s) to {path}")
