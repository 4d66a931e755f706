"""Pydantic model for the deployment settings file."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

Mode = Literal["marker", "explicit"]

DEFAULT_MARKER_FILE = "VERSION.txt"

# Manifests and READMEs that carry the release tag. The marker file is
# listed last so it only advances once every other target was attempted.
DEFAULT_FILES: tuple[str, ...] = (
    "valu3/Cargo.toml",
    "valu3_derive/Cargo.toml",
    "valu3/README.md",
    "valu3_derive/README.md",
    "README.md",
    DEFAULT_MARKER_FILE,
)


class Settings(BaseModel):
    """Retag settings persisted to disk.

    Parameters
    ----------
    mode: ``marker`` reads the old tag from *marker_file* and expects one
        argument; ``explicit`` expects the old and new tags as arguments.
    marker_file: Path of the version marker file, relative to the root.
    files: Ordered target list, relative to the root. Order only affects
        the report.
    """

    mode: Mode = Field(default="marker")
    marker_file: str = Field(default=DEFAULT_MARKER_FILE)
    files: list[str] = Field(default_factory=lambda: list(DEFAULT_FILES))

    @field_validator("marker_file")
    @classmethod
    def _chk_marker(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("marker_file must be a non-empty path")
        return v

    @field_validator("files")
    @classmethod
    def _chk_files(cls, v: list[str]) -> list[str]:
        out = [f.strip() for f in v]
        if any(not f for f in out):
            raise ValueError("files entries must be non-empty paths")
        return out
