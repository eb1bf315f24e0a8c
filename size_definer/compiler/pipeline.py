"""Generation pipeline: size the registered types, then write the file.

Sizes are collected before the output is opened so that a failing size
query never truncates an existing file.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from llvmlite import binding as llvm

from size_definer.backend.constants import DEFINE_TEMPLATE, OUTPUT_ENCODING, SIZE_PREFIX
from size_definer.backend.sizing import SizeEntry, collect_size_entries
from size_definer.internals import errors as er
from size_definer.internals.errors import OutputFileError
from size_definer.internals.report import Reporter


def format_size_define(entry: SizeEntry, prefix: str = SIZE_PREFIX) -> str:
    """Render one entry as a preprocessor line, newline included."""
    return DEFINE_TEMPLATE.format(prefix=prefix, name=entry.name, size=entry.size_bytes)


def render_size_defines(entries: Iterable[SizeEntry], prefix: str = SIZE_PREFIX) -> str:
    return "".join(format_size_define(entry, prefix) for entry in entries)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def write_size_file(path: str, entries: Iterable[SizeEntry]) -> None:
    """Truncate `path` and write one line per entry.

    Raises:
        OutputFileError: SD0002 if the file cannot be opened,
            SD0003 if writing or closing it fails.
    """
    try:
        f = open(path, "w", encoding=OUTPUT_ENCODING, newline="\n")
    except OSError as e:
        raise OutputFileError(er.ERR.SD0002, path=path, reason=_reason(e)) from e

    try:
        with f:
            f.write(render_size_defines(entries))
    except OSError as e:
        raise OutputFileError(er.ERR.SD0003, path=path, reason=_reason(e)) from e


def generate_size_file(
    path: str,
    reporter: Reporter,
    target_data: Optional[llvm.TargetData] = None,
) -> List[SizeEntry]:
    """Write the size constants of every registered type to `path`.

    Returns:
        The entries that were written, in output order.
    """
    entries = collect_size_entries(target_data=target_data)
    er.emit(reporter, er.ERR.SD0100, path=path)
    write_size_file(path, entries)
    return entries
