from __future__ import annotations

import json

import pytest
import yaml

from connswitch.codecs import Format, decode, detect_kind, encode
from connswitch.exceptions import ParseError, UnsupportedFormat
from connswitch.normalize import normalize


@pytest.mark.parametrize(
    "name, expected",
    [
        (".dbconfig.json", Format.JSON),
        ("conf.JSON", Format.JSON),
        ("a.yaml", Format.YAML),
        ("a.YML", Format.YAML),
        ("settings.ini", Format.INI),
        ("settings.toml", None),
        ("noext", None),
    ],
)
def test_detect_kind(name, expected) -> None:
    assert detect_kind(name) == expected


def test_decode_ini_keeps_case_and_percent() -> None:
    raw = decode(
        "[prod]\nconnectionString=postgres://u:p%40ss@h/db\nactive=true\nPool=5\n",
        Format.INI,
    )
    assert raw == {
        "prod": {
            "connectionString": "postgres://u:p%40ss@h/db",
            "active": "true",
            "Pool": "5",
        }
    }


@pytest.mark.parametrize(
    "kind, text",
    [
        (Format.JSON, '{"clients": {'),
        (Format.YAML, "clients: [unclosed"),
        (Format.INI, "connectionString=no-section\n"),
        (Format.INI, "[a]\nconnectionString=x\n[a]\nconnectionString=y\n"),
    ],
)
def test_decode_errors_name_format(kind, text) -> None:
    with pytest.raises(ParseError) as excinfo:
        decode(text, kind)

    assert excinfo.value.kind == kind.value
    assert f"Failed to parse {kind.value.upper()} config file" in str(excinfo.value)
    assert excinfo.value.original is not None


def test_unknown_kind_is_unsupported() -> None:
    with pytest.raises(UnsupportedFormat):
        decode("{}", "toml")
    with pytest.raises(UnsupportedFormat):
        encode({"clients": {}}, "toml")


def test_encode_json_keeps_insertion_order() -> None:
    data = {
        "clients": {
            "zeta": {"connectionString": "z", "note": "last", "active": False},
            "alpha": {"active": True, "connectionString": "a"},
        }
    }
    text = encode(data, Format.JSON)

    assert text.endswith("\n")
    assert list(json.loads(text)["clients"]) == ["zeta", "alpha"]
    assert list(json.loads(text)["clients"]["zeta"]) == ["connectionString", "note", "active"]
    assert '  "clients": {' in text


def test_encode_yaml_block_style() -> None:
    data = {"clients": {"b": {"connectionString": "x", "active": True}, "a": {"connectionString": "y"}}}
    text = encode(data, Format.YAML)

    assert "{" not in text
    assert text.index("b:") < text.index("a:")
    assert yaml.safe_load(text) == data


def test_encode_ini_writes_only_clients() -> None:
    data = {
        "clients": {
            "x": {"connectionString": "mysql://x", "active": True, "port": 3306},
            "y": {"connectionString": "mysql://y", "active": False},
        }
    }
    text = encode(data, Format.INI)

    assert "clients" not in text
    assert "[x]\nconnectionString=mysql://x\nactive=true\nport=3306\n" in text
    assert "[y]\nconnectionString=mysql://y\nactive=false\n" in text


@pytest.mark.parametrize("kind", list(Format))
def test_round_trip_preserves_keys_strings_and_flags(kind) -> None:
    source = {
        "clients": {
            "dev": {"connectionString": "postgres://dev", "active": False},
            "prod": {"connectionString": "postgres://prod", "active": True},
            "bare": {"connectionString": "sqlite:///tmp.db"},
        }
    }
    # INI has no "clients" wrapper of its own
    raw = source["clients"] if kind is Format.INI else source
    model = normalize(raw, kind)
    again = normalize(decode(encode(model.to_dict(), kind), kind), kind)

    assert again.keys() == ["dev", "prod", "bare"]
    for key in again.keys():
        assert again.clients[key].fields["connectionString"] == model.clients[key].fields["connectionString"]
        assert again.clients[key].active == model.clients[key].active
