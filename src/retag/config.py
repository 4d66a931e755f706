"""Runtime configuration helpers.

Merges the persisted :class:`~retag.settings.Settings` with optional CLI
overrides into the immutable :class:`RuntimeConfig` used for one run.
Relative paths are resolved against the repository root.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .settings.schema import DEFAULT_FILES, DEFAULT_MARKER_FILE, Mode
from .settings.store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RuntimeConfig:
    root: Path
    mode: Mode
    marker_file: Path
    files: tuple[Path, ...]


def make_runtime_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and CLI overrides.

    Rules:
    - ``args.root`` (default ``.``) is the base for every relative path,
      including the default settings file location.
    - ``args.config`` names the settings file explicitly; otherwise
      ``RETAG_CONFIG`` or ``<root>/retag.json`` is used.
    - ``args.mode``, ``args.marker_file`` and ``args.files`` override the
      persisted values for this run only. ``files`` replaces the whole list.
    - Without an explicit target list the default one is used, with its
      marker entry swapped for the configured marker file.
    """
    root = Path(getattr(args, "root", None) or ".")
    config_path = getattr(args, "config", None)
    settings = SettingsStore.load(
        config_path if config_path else SettingsStore.settings_path(root)
    )

    mode = getattr(args, "mode", None) or settings.mode
    marker = getattr(args, "marker_file", None) or settings.marker_file
    files = getattr(args, "files", None)
    if not files:
        if "files" in settings.model_fields_set:
            files = settings.files
        else:
            # The marker is both source and target: keep it in the default list.
            files = [f for f in DEFAULT_FILES if f != DEFAULT_MARKER_FILE] + [marker]

    cfg = RuntimeConfig(
        root=root,
        mode=mode,
        marker_file=root / marker,
        files=tuple(root / f for f in files),
    )
    logger.debug(
        "runtime config: root=%s mode=%s marker=%s files=%d",
        cfg.root,
        cfg.mode,
        cfg.marker_file,
        len(cfg.files),
    )
    return cfg
