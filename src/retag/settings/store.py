"""Settings persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from retag.errors import ConfigError, ConfigReason

from .schema import Settings

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "retag.json"


class SettingsStore:
    """Load :class:`Settings` from disk."""

    @staticmethod
    def settings_path(root: Path | str = ".") -> Path:
        """Return the settings JSON path, honouring ``RETAG_CONFIG``."""
        override = os.environ.get("RETAG_CONFIG")
        if override:
            return Path(override).expanduser()
        return Path(root) / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Path | str | None = None) -> Settings:
        """Load settings from *path*, returning defaults when it is absent.

        A file that exists but cannot be read or validated raises
        :class:`ConfigError` rather than falling back to defaults.
        """
        p = Path(path) if path is not None else cls.settings_path()
        if not p.exists():
            logger.debug("no settings file at %s, using defaults", p)
            return Settings()
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
            settings = Settings.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            raise ConfigError(
                ConfigReason.INVALID_SETTINGS, f"invalid settings file {p}: {e}"
            ) from e
        logger.debug("loaded settings from %s", p)
        return settings
