"""Value types shared by the resolver, the retagger and the CLI report."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VersionPair(BaseModel):
    """The tag being replaced (``old``) and its replacement (``new``).

    Both values are opaque strings; no semantic version parsing is done.
    ``old == new`` is allowed and simply rewrites every target unchanged.
    """

    model_config = ConfigDict(frozen=True)

    old: str = Field(..., description="Current tag, searched for literally")
    new: str = Field(..., description="Tag written in place of every match")

    @field_validator("old", "new")
    @classmethod
    def _chk_tag(cls, v: str) -> str:
        if not v:
            raise ValueError("version strings must be non-empty")
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            # Undecodable argv bytes arrive as lone surrogates.
            raise ValueError("version strings must be valid UTF-8") from None
        return v


class Status(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    WRITE_ERROR = "write_error"


class SubstitutionResult(BaseModel):
    """Outcome of one target file within a run."""

    path: str
    found: bool = False
    status: Status
    occurrences: int = Field(default=0, ge=0)
    error: Optional[str] = Field(
        None, description="I/O error text when status is write_error"
    )

    def describe(self, pair: VersionPair) -> str:
        """Return the one-line report for this file."""
        if self.status is Status.SUCCESS:
            plural = "occurrence" if self.occurrences == 1 else "occurrences"
            return (
                f"Replaced '{pair.old}' with '{pair.new}' in {self.path} "
                f"({self.occurrences} {plural})"
            )
        if self.status is Status.NOT_FOUND:
            return f"File {self.path} not found."
        return f"Failed to replace in {self.path}: {self.error}"
