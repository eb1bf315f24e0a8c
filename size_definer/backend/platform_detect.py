"""
Target triple parsing.

The sizes written by the generator are those of the host the build runs on;
the parsed triple decides how the host target machine is configured.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass
class TargetPlatform:
    """Represents a compilation target platform."""
    arch: str      # arm64, x86_64, i686, etc.
    vendor: str    # apple, pc, unknown, etc.
    os: str        # darwin, linux, windows, etc.
    abi: str       # (empty), gnu, musl, msvc, etc.

    @property
    def is_linux(self) -> bool:
        """Returns True if target is Linux."""
        return self.os == 'linux'


def parse_triple(triple: str) -> TargetPlatform:
    """
    Parse an LLVM target triple into components.

    Examples:
        arm64-apple-darwin25.0.0 -> TargetPlatform(arm64, apple, darwin, '')
        x86_64-pc-linux-gnu -> TargetPlatform(x86_64, pc, linux, gnu)
        x86_64-pc-windows-msvc -> TargetPlatform(x86_64, pc, windows, msvc)
    """
    parts = triple.split('-')

    # Handle version numbers in OS (e.g., darwin25.0.0, macosx14.0)
    os_part = parts[2] if len(parts) > 2 else 'unknown'
    if os_part.startswith('darwin') or os_part.startswith('macos'):
        os_part = 'darwin'
    elif '.' in os_part:
        os_part = os_part.split('.')[0]

    return TargetPlatform(
        arch=parts[0] if len(parts) > 0 else 'unknown',
        vendor=parts[1] if len(parts) > 1 else 'unknown',
        os=os_part,
        abi=parts[3] if len(parts) > 3 else '',
    )
