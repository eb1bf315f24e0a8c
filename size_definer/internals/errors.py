# size_definer/internals/errors.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from size_definer.internals.report import Reporter
from size_definer.backend.constants import EXIT_MISSING_FILENAME, EXIT_OUTPUT_FILE


class Severity(str, Enum):
    ERROR = "error"
    NOTE = "note"


class Category(str, Enum):
    GENERAL   = "general"
    ARGUMENT  = "argument"
    IO        = "io"
    INTERNAL  = "internal"


@dataclass(frozen=True)
class ErrorMessage:
    code: str
    severity: Severity
    text: str
    category: Category = Category.GENERAL
    doc: str = ""
    exit_code: int = 0


REGISTRY: Dict[str, ErrorMessage] = {}

class _ErrorCatalog:
    def __init__(self, backing: Dict[str, ErrorMessage]) -> None:
        self._registry = backing

    def __getattr__(self, name: str) -> ErrorMessage:
        try:
            return self._registry[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __getitem__(self, code: str) -> ErrorMessage:
        return self._registry[code]


ERR = _ErrorCatalog(REGISTRY)


class FatalError(Exception):
    """A user-facing failure that ends the run with the message's exit code."""

    def __init__(self, em: ErrorMessage, **kwargs) -> None:
        self.message = em
        self.kwargs = kwargs
        super().__init__(f"{em.code}: {_fmt(em.code, **kwargs)}")

    @property
    def exit_code(self) -> int:
        return self.message.exit_code


class ArgumentError(FatalError):
    """Wrong number of command-line arguments."""


class OutputFileError(FatalError):
    """The output file could not be opened or written."""


def emit(r: Reporter, em: ErrorMessage, **kwargs) -> None:
    text = _fmt(em.code, **kwargs)
    if em.severity == Severity.ERROR:
        r.error(em.code, text)
    else:
        r.note(em.code, text)

def emit_fatal(r: Reporter, err: FatalError) -> int:
    """Record a fatal error in the reporter and return its exit code."""
    emit(r, err.message, **err.kwargs)
    return err.exit_code

def raise_internal_error(code: str, **kwargs) -> None:
    """Raise a RuntimeError for internal generator errors.

    Internal errors (IE codes) indicate bugs in the type registry or the
    LLVM setup, not problems with the command line or the filesystem.

    Raises:
        RuntimeError: Always raises with formatted error message
    """
    text = _fmt(code, **kwargs)
    raise RuntimeError(f"{code}: {text}")


#
# --- Helpers
#

def _add(msg: ErrorMessage) -> None:
    if msg.code in REGISTRY:
        raise ValueError(f"duplicate error code {REGISTRY[msg.code]} in {msg}")
    REGISTRY[msg.code] = msg

def _get(code: str) -> ErrorMessage:
    try:
        return REGISTRY[code]
    except KeyError:
        raise KeyError(f"unknown error code: {code}")

def _fmt(code: str, **kwargs) -> str:
    msg = _get(code)
    try:
        return msg.text.format(**kwargs)
    except KeyError as key_error:
        missing = key_error.args[0]
        raise KeyError(f"missing text key '{missing}' for {code} "
                       f"(needed by: {msg.text!r})") from None

#
# --- Registry population
#

# Command line - SD00xx range
_add(ErrorMessage("SD0001", Severity.ERROR,
    "no filename supplied",
    Category.ARGUMENT, "Usage: size_definer <output-path>.",
    exit_code=EXIT_MISSING_FILENAME))

_add(ErrorMessage("SD0002", Severity.ERROR,
    "can't open file '{path}': {reason}",
    Category.IO, "Output path is in a missing or read-only directory, or is not a regular file.",
    exit_code=EXIT_OUTPUT_FILE))

_add(ErrorMessage("SD0003", Severity.ERROR,
    "can't write file '{path}': {reason}",
    Category.IO, "Output file was opened but writing or closing it failed.",
    exit_code=EXIT_OUTPUT_FILE))

# Progress notes - SD01xx range
_add(ErrorMessage("SD0100", Severity.NOTE,
    "Generating file: {path}",
    Category.GENERAL, "Printed once per run before the output file is opened."))

# Internal errors (generator bugs) - IE00xx range
_add(ErrorMessage("IE0002", Severity.ERROR,
    "cannot determine size of '{name}': {reason}",
    Category.INTERNAL, "LLVM rejected the layout or returned a non-positive size."))
