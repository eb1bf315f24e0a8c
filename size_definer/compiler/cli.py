"""CLI entry point and argument handling."""
from __future__ import annotations

import sys

from size_definer.backend.constants import EXIT_SUCCESS
from size_definer.internals import errors as er
from size_definer.internals.report import Reporter


def main(argv: list[str] | None = None) -> int:
    """Generator entry point: `size_definer <output-path>`.

    The first argument is the output path, taken verbatim (a leading dash
    or a lone "--" is a filename like any other). Later arguments are
    ignored.

    Returns:
        0 on success, 1 if no filename was given, 2 if the file could not
        be opened or written.
    """
    if argv is None:
        argv = sys.argv[1:]

    from size_definer.compiler.pipeline import generate_size_file

    reporter = Reporter()
    try:
        if not argv:
            raise er.ArgumentError(er.ERR.SD0001)
        generate_size_file(argv[0], reporter)
    except er.FatalError as err:
        exit_code = er.emit_fatal(reporter, err)
        reporter.print()
        return exit_code

    reporter.print()
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
