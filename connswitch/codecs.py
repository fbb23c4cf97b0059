"""Decode and encode the three supported config file formats."""

from __future__ import annotations

import configparser
import io
import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from connswitch.exceptions import ParseError, UnsupportedFormat


class Format(str, Enum):
    JSON = "json"
    YAML = "yaml"
    INI = "ini"


_EXTENSIONS = {
    ".json": Format.JSON,
    ".yaml": Format.YAML,
    ".yml": Format.YAML,
    ".ini": Format.INI,
}


def detect_kind(path: str | Path) -> Format | None:
    """Infer the format from the file extension (case-insensitive)."""
    return _EXTENSIONS.get(Path(path).suffix.lower())


def _as_format(kind: Format | str) -> Format:
    try:
        return Format(kind)
    except ValueError as exc:
        raise UnsupportedFormat(f"Unsupported config format: {kind}") from exc


def _ini_parser() -> configparser.ConfigParser:
    # Keep "connectionString" as written and leave "%" in URLs alone
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


def _ini_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _decode_ini(text: str) -> dict[str, dict[str, str]]:
    parser = _ini_parser()
    parser.read_string(text)
    return {section: dict(parser[section]) for section in parser.sections()}


def _encode_ini(clients: dict[str, dict[str, Any]]) -> str:
    parser = _ini_parser()
    parser.read_dict(
        {
            key: {name: _ini_value(value) for name, value in fields.items()}
            for key, fields in clients.items()
        }
    )
    buffer = io.StringIO()
    parser.write(buffer, space_around_delimiters=False)
    return buffer.getvalue().rstrip("\n") + "\n"


def decode(text: str, kind: Format | str) -> Any:
    """Parse raw file text into plain dicts, lists and scalars."""
    kind = _as_format(kind)
    try:
        if kind is Format.JSON:
            return json.loads(text)
        if kind is Format.YAML:
            return yaml.safe_load(text)
        return _decode_ini(text)
    except (ValueError, yaml.YAMLError, configparser.Error) as exc:
        raise ParseError(
            f"Failed to parse {kind.value.upper()} config file: {exc}",
            kind=kind.value,
            original=exc,
        ) from exc


def encode(data: dict[str, Any], kind: Format | str) -> str:
    """Serialize ``{"clients": {...}}`` back to text in the given format.

    INI has no outer wrapper, so only the ``clients`` mapping is written.
    """
    kind = _as_format(kind)
    if kind is Format.JSON:
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if kind is Format.YAML:
        return yaml.safe_dump(
            data, sort_keys=False, default_flow_style=False, allow_unicode=True
        )
    return _encode_ini(data.get("clients") or {})
