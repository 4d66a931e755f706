"""Persisted deployment settings."""

from .schema import DEFAULT_FILES, DEFAULT_MARKER_FILE, Settings
from .store import SettingsStore

__all__ = ["DEFAULT_FILES", "DEFAULT_MARKER_FILE", "Settings", "SettingsStore"]
