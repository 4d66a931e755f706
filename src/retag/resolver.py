"""Input resolution: turn CLI arguments into a :class:`VersionPair`.

A deployment picks one mode up front; the resolver never guesses the mode
from the number of arguments it receives.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

from pydantic import ValidationError

from retag.config import RuntimeConfig
from retag.errors import ConfigError, ConfigReason
from retag.models import VersionPair

__all__ = [
    "ExplicitResolver",
    "InputResolver",
    "MarkerFileResolver",
    "make_resolver",
]

logger = logging.getLogger(__name__)


class InputResolver(Protocol):
    usage: str

    def resolve(self, args: Sequence[str]) -> VersionPair:
        ...


def _pair(old: str, new: str) -> VersionPair:
    try:
        return VersionPair(old=old, new=new)
    except ValidationError:
        raise ConfigError(
            ConfigReason.INVALID_VERSION, "last and new tags must be non-empty"
        ) from None


class MarkerFileResolver:
    """Old tag from the marker file, new tag from the single argument."""

    usage = "retag <new_tag>"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def resolve(self, args: Sequence[str]) -> VersionPair:
        if not self.path.is_file():
            raise ConfigError(
                ConfigReason.MISSING_MARKER_FILE,
                f"version marker file {self.path} not found",
            )
        if len(args) != 1:
            raise ConfigError(
                ConfigReason.BAD_ARGUMENT_COUNT,
                f"expected 1 argument, got {len(args)}",
            )
        try:
            old = self.path.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise ConfigError(
                ConfigReason.MISSING_MARKER_FILE,
                f"cannot read version marker file {self.path}: {e}",
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigError(
                ConfigReason.INVALID_VERSION,
                f"version marker file {self.path} is not valid UTF-8: {e}",
            ) from e
        logger.debug("last tag %r read from %s", old, self.path)
        return _pair(old, args[0])


class ExplicitResolver:
    """Old and new tags both taken from the arguments, in that order."""

    usage = "retag <last_tag> <new_tag>"

    def resolve(self, args: Sequence[str]) -> VersionPair:
        if len(args) != 2:
            raise ConfigError(
                ConfigReason.BAD_ARGUMENT_COUNT,
                f"expected 2 arguments, got {len(args)}",
            )
        return _pair(args[0], args[1])


def make_resolver(config: RuntimeConfig) -> InputResolver:
    """Return the resolver variant configured for this deployment."""
    if config.mode == "explicit":
        return ExplicitResolver()
    return MarkerFileResolver(config.marker_file)
