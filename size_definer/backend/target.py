"""
Host target setup for size queries.

Wraps llvmlite's native target initialization and hands out the
TargetData whose layout rules decide every emitted size.
"""
from __future__ import annotations

from typing import Optional

from llvmlite import binding as llvm

from size_definer.backend.platform_detect import parse_triple


class TargetManager:
    """Creates and caches the host target machine."""

    def __init__(self) -> None:
        self._llvm_init = False
        self._tm: Optional[llvm.TargetMachine] = None

    def ensure_llvm(self) -> None:
        """Initialize LLVM native target and assembly printer.

        Safe to call multiple times.
        """
        if self._llvm_init:
            return
        llvm.initialize_native_target()
        llvm.initialize_native_asmprinter()
        self._llvm_init = True

    def _create_target_machine_with_reloc(self, triple: str) -> llvm.TargetMachine:
        """Create target machine with the relocation model the platform expects.

        Linux (ARM64/x86_64) needs PIC; macOS and Windows use the default.
        """
        self.ensure_llvm()
        target = llvm.Target.from_triple(triple)

        reloc = "default"
        if parse_triple(triple).is_linux:
            reloc = "pic"

        return target.create_target_machine(reloc=reloc)

    def target_machine(self) -> llvm.TargetMachine:
        """Return the (cached) TargetMachine for the host triple."""
        self.ensure_llvm()
        if self._tm is None:
            self._tm = self._create_target_machine_with_reloc(llvm.get_default_triple())
        return self._tm

    def target_data(self) -> llvm.TargetData:
        """Return the host data layout used to size types."""
        return self.target_machine().target_data
