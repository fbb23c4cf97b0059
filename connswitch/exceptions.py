from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ConnSwitchError(RuntimeError):
    """Base class for every error raised by connswitch."""


class ConfigNotFound(ConnSwitchError):
    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class UnsupportedFormat(ConnSwitchError):
    def __init__(self, message: str, *, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ParseError(ConnSwitchError):
    def __init__(
        self,
        message: str,
        *,
        kind: str,
        original: Exception | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.original = original


class InvalidConfig(ConnSwitchError):
    def __init__(self, message: str, *, client_key: str | None = None):
        super().__init__(message)
        self.client_key = client_key


class UnknownClient(ConnSwitchError):
    def __init__(self, message: str, *, key: str, available: Sequence[str] = ()):
        super().__init__(message)
        self.key = key
        self.available = list(available)


class InvalidArgument(ConnSwitchError, ValueError):
    pass


class ConfigWriteError(ConnSwitchError):
    def __init__(
        self,
        message: str,
        *,
        path: Path,
        original: Exception | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.original = original
