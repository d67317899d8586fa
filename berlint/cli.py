"""Command-line entry point: check a ``.ber`` map file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .errors import MapError, format_error
from .mapcheck import load_map

USAGE = "usage: berlint <PATH_TO_MAP>\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named on the command line; return the exit status.

    A rejected map is reported on standard error; the status stays zero,
    only a wrong number of arguments gives a non-zero status.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(USAGE)
        return 1
    try:
        load_map(args[0])
    except MapError as exc:
        sys.stderr.write(format_error(exc.kind))
    return 0


if __name__ == "__main__":
    sys.exit(main())