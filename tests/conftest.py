"""Shared fixtures for the connswitch test suite."""

import pytest

from tests.cli_helpers import set_cli_env


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every test in an empty directory with no overrides exported."""
    monkeypatch.delenv("CONNSWITCH_DEBUG", raising=False)
    set_cli_env(monkeypatch, tmp_path)
    return tmp_path
