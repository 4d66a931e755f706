from __future__ import annotations

from pathlib import Path

import pytest

from retag.config import RuntimeConfig
from retag.errors import ConfigError, ConfigReason
from retag.resolver import ExplicitResolver, MarkerFileResolver, make_resolver


def test_marker_mode_reads_trimmed_marker(tmp_path: Path) -> None:
    marker = tmp_path / "VERSION.txt"
    marker.write_text("  1.2.0\n")
    pair = MarkerFileResolver(marker).resolve(["1.2.1"])
    assert (pair.old, pair.new) == ("1.2.0", "1.2.1")


def test_marker_mode_missing_marker(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as ei:
        MarkerFileResolver(tmp_path / "VERSION.txt").resolve(["1.2.1"])
    assert ei.value.reason is ConfigReason.MISSING_MARKER_FILE


def test_missing_marker_checked_before_argument_count(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as ei:
        MarkerFileResolver(tmp_path / "VERSION.txt").resolve([])
    assert ei.value.reason is ConfigReason.MISSING_MARKER_FILE


@pytest.mark.parametrize("args", [[], ["1.2.1", "1.2.2"]])
def test_marker_mode_bad_argument_count(tmp_path: Path, args: list[str]) -> None:
    marker = tmp_path / "VERSION.txt"
    marker.write_text("1.2.0")
    with pytest.raises(ConfigError) as ei:
        MarkerFileResolver(marker).resolve(args)
    assert ei.value.reason is ConfigReason.BAD_ARGUMENT_COUNT


def test_empty_marker_is_invalid_version(tmp_path: Path) -> None:
    marker = tmp_path / "VERSION.txt"
    marker.write_text("\n")
    with pytest.raises(ConfigError) as ei:
        MarkerFileResolver(marker).resolve(["1.2.1"])
    assert ei.value.reason is ConfigReason.INVALID_VERSION


def test_explicit_mode_takes_both_in_order() -> None:
    pair = ExplicitResolver().resolve(["v1", "v2"])
    assert (pair.old, pair.new) == ("v1", "v2")


@pytest.mark.parametrize("args", [[], ["v2"], ["v1", "v2", "v3"]])
def test_explicit_mode_bad_argument_count(args: list[str]) -> None:
    with pytest.raises(ConfigError) as ei:
        ExplicitResolver().resolve(args)
    assert ei.value.reason is ConfigReason.BAD_ARGUMENT_COUNT


def test_explicit_mode_rejects_empty_tag() -> None:
    with pytest.raises(ConfigError) as ei:
        ExplicitResolver().resolve(["", "v2"])
    assert ei.value.reason is ConfigReason.INVALID_VERSION


def test_make_resolver_follows_configured_mode(tmp_path: Path) -> None:
    base = dict(root=tmp_path, marker_file=tmp_path / "VERSION.txt", files=())
    marker = make_resolver(RuntimeConfig(mode="marker", **base))
    explicit = make_resolver(RuntimeConfig(mode="explicit", **base))
    assert isinstance(marker, MarkerFileResolver)
    assert marker.path == tmp_path / "VERSION.txt"
    assert isinstance(explicit, ExplicitResolver)
    assert marker.usage == "retag <new_tag>"
    assert explicit.usage == "retag <last_tag> <new_tag>"


def test_undecodable_marker_is_invalid_version(tmp_path: Path) -> None:
    marker = tmp_path / "VERSION.txt"
    marker.write_bytes(b"1.0\xff\n")
    with pytest.raises(ConfigError) as ei:
        MarkerFileResolver(marker).resolve(["1.1"])
    assert ei.value.reason is ConfigReason.INVALID_VERSION


@pytest.mark.parametrize("args", [["1.0", "1.1\udcff"], ["1.0\udcff", "1.1"]])
def test_surrogate_tags_are_invalid_version(args: list[str]) -> None:
    with pytest.raises(ConfigError) as ei:
        ExplicitResolver().resolve(args)
    assert ei.value.reason is ConfigReason.INVALID_VERSION
