"""Best-effort multi-file literal find-and-replace.

Every target is processed independently and in order: a missing file or an
I/O failure is recorded for that file and the pass continues with the next
one. Files already rewritten stay rewritten; there is no rollback.

Content is handled as bytes so that files round-trip byte-identically
regardless of encoding or line endings. The version strings are matched
in their UTF-8 encoding.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from retag.models import Status, SubstitutionResult, VersionPair

__all__ = ["replace_literal", "retag", "retag_file"]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def replace_literal(content: bytes, old: bytes, new: bytes) -> tuple[bytes, int]:
    """Replace every non-overlapping occurrence of *old* with *new*.

    Matching is plain substring search: case-sensitive, no pattern syntax,
    no word boundaries. Returns the new content and the match count.
    """
    if not old:
        raise ValueError("old must be non-empty")
    count = content.count(old)
    if count == 0:
        return content, 0
    return content.replace(old, new), count


def retag_file(pair: VersionPair, path: PathLike) -> SubstitutionResult:
    """Rewrite a single file, replacing ``pair.old`` with ``pair.new``."""
    p = Path(path)
    if not p.is_file():
        logger.warning("target not found: %s", p)
        return SubstitutionResult(path=str(path), status=Status.NOT_FOUND)

    old = pair.old.encode("utf-8")
    new = pair.new.encode("utf-8")
    try:
        content = p.read_bytes()
        updated, count = replace_literal(content, old, new)
        # Always rewrite, even without a match.
        p.write_bytes(updated)
    except OSError as e:
        logger.error("failed to rewrite %s: %s", p, e)
        return SubstitutionResult(
            path=str(path), status=Status.WRITE_ERROR, error=str(e)
        )

    logger.info("replaced %d occurrence(s) in %s", count, p)
    return SubstitutionResult(
        path=str(path), found=count > 0, status=Status.SUCCESS, occurrences=count
    )


def retag(pair: VersionPair, files: Iterable[PathLike]) -> list[SubstitutionResult]:
    """Apply ``pair`` to every path in *files*, in order.

    Never raises for per-file problems; inspect the returned statuses.
    """
    results: list[SubstitutionResult] = []
    for path in files:
        results.append(retag_file(pair, path))
    logger.debug(
        "retag pass complete: %d file(s), %d ok",
        len(results),
        sum(1 for r in results if r.status is Status.SUCCESS),
    )
    return results
