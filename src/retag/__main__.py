"""Console entrypoint for retag.

This module delegates to :mod:`retag.cli` so that running ``python -m retag``
or the installed ``retag`` console script executes the same code.
"""

from __future__ import annotations

import sys

from retag.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`retag.cli.main`)."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
