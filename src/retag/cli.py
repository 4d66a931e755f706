"""Command-line interface for retag.

Two invocation shapes are supported, chosen by the deployment's settings
(or ``--mode`` for a single run):

    retag <new_tag>              # marker mode, last tag read from VERSION.txt
    retag <last_tag> <new_tag>   # explicit mode

The run exits 0 once every target has been attempted, even when some were
missing or could not be written, and 1 when the inputs cannot be resolved.
"""

from __future__ import annotations

import argparse
import logging
import sys

from retag import __version__
from retag.config import make_runtime_config
from retag.errors import ConfigError
from retag.resolver import make_resolver
from retag.retagger import retag

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(
        prog="retag",
        description="Replace the last release tag with a new one across project files",
    )
    p.add_argument(
        "tags",
        nargs="*",
        metavar="TAG",
        help="<new_tag> in marker mode, <last_tag> <new_tag> in explicit mode",
    )
    p.add_argument(
        "--root",
        type=str,
        default=".",
        help="Repository root that relative paths resolve against (default: .)",
    )
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Settings JSON file (default: $RETAG_CONFIG or <root>/retag.json)",
    )
    p.add_argument(
        "--mode",
        choices=["marker", "explicit"],
        default=None,
        help="Override the configured input mode for this run",
    )
    p.add_argument(
        "--marker-file",
        dest="marker_file",
        type=str,
        default=None,
        help="Override the version marker file path",
    )
    p.add_argument(
        "--file",
        dest="files",
        action="append",
        default=None,
        help="Target file (repeatable); replaces the configured list",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    p.add_argument(
        "--version",
        action="store_true",
        help="Print the retag version and exit",
    )
    return p.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """Run one retag pass and return the process exit code."""
    args = parse_args(argv)

    if args.version:
        print(f"retag {__version__}")
        return EXIT_OK

    configure_logging(args.verbose)

    usage = "retag <new_tag> | retag <last_tag> <new_tag>"
    try:
        config = make_runtime_config(args=args)
        resolver = make_resolver(config)
        usage = resolver.usage
        pair = resolver.resolve(args.tags)
    except ConfigError as e:
        logger.debug("input resolution failed: %r", e)
        print(f"Usage: {usage}", file=sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    for result in retag(pair, config.files):
        print(result.describe(pair))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
