"""Fatal configuration errors raised before any target file is touched."""

from __future__ import annotations

from enum import Enum


class ConfigReason(str, Enum):
    MISSING_MARKER_FILE = "missing_marker_file"
    BAD_ARGUMENT_COUNT = "bad_argument_count"
    INVALID_VERSION = "invalid_version"
    INVALID_SETTINGS = "invalid_settings"


class ConfigError(RuntimeError):
    """Input resolution or settings failure that aborts the whole run."""

    def __init__(self, reason: ConfigReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason

    def __repr__(self) -> str:  # pragma: no cover
        return f"ConfigError({self.reason.name}: {self})"
