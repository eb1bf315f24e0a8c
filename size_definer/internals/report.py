from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

class C:
    """ANSI color/style escape codes."""
    RESET = "\x1b[0m"
    BOLD  = "\x1b[1m"
    DIM   = "\x1b[2m"
    RED   = "\x1b[31m"
    CYAN  = "\x1b[36m"

@dataclass
class Diagnostic:
    kind: str
    code: str
    message: str


class Reporter:
    def __init__(self, program: str = "size_definer") -> None:
        self.program = program
        self.items: List[Diagnostic] = []

    def error(self, code: str, msg: str):
        self.items.append(Diagnostic("error", code, msg))

    def note(self, code: str, msg: str):
        self.items.append(Diagnostic("note", code, msg))

    def format(self, use_color: bool = True) -> str:
        """Render all diagnostics, one line each.

        use_color → ANSI colorize program name and kind
        """
        out: List[str] = []
        for d in self.items:
            # Ensure message ends with period
            message = d.message if d.message.endswith('.') else f"{d.message}."

            if use_color:
                if d.kind == "error":
                    kind = f"{C.BOLD}{C.RED}error{C.RESET}"
                else:
                    kind = f"{C.BOLD}note{C.RESET}"
                out.append(f"{C.CYAN}{self.program}{C.RESET}: {kind} [{C.DIM}{d.code}{C.RESET}]: {message}")
            else:
                out.append(f"{self.program}: {d.kind} [{d.code}]: {message}")

        return "\n".join(out)

    def print(self, stream=None, use_color: Optional[bool] = None) -> None:
        """Print diagnostics to `stream` (default: sys.stderr) and clear them.

        Color is auto-enabled for TTY unless NO_COLOR or TERM=dumb.
        """
        import os, sys
        stream = stream or sys.stderr

        if use_color is None:
            is_tty = getattr(stream, "isatty", lambda: False)()
            no_color = os.getenv("NO_COLOR") is not None
            dumb = os.getenv("TERM") == "dumb"
            use_color = bool(is_tty and not no_color and not dumb)

        text = self.format(use_color=use_color)
        if text:
            print(text, file=stream)
        self.items.clear()
