"""Exceptions raised by Fixture Warden."""

from pathlib import PurePath


class WardenError(Exception):
    """Base exception for Fixture Warden errors."""


class FixtureError(WardenError):
    """A fixture file could not be read or parsed."""

    def __init__(self, message: str, line: int | None = None) -> None:
        location = f" (line {line})" if line is not None else ""
        super().__init__(f"{message}{location}")


class EngineError(WardenError):
    """The analysis engine could not be started at all."""


class ConfigError(WardenError):
    """Configuration file is unreadable or invalid."""

    def __init__(self, message: str, path: PurePath | None = None) -> None:
        suffix = f": {path}" if path is not None else ""
        super().__init__(f"{message}{suffix}")
