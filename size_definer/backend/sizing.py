"""Byte sizes of the registered geometry types on the host platform."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from llvmlite import binding as llvm

from size_definer.backend.target import TargetManager
from size_definer.backend.types.geometry import GEOMETRY_TYPES, GeometryType
from size_definer.internals.errors import raise_internal_error


@dataclass(frozen=True)
class SizeEntry:
    """One (type name, byte size) pair destined for the output file."""
    name: str
    size_bytes: int


class TypeSizing:
    """Calculate ABI sizes of geometry types for one data layout."""

    def __init__(self, target_data: llvm.TargetData):
        self.target_data = target_data

    def get_type_size_bytes(self, geometry_type: GeometryType) -> int:
        """Get the size in bytes of a geometry type, tail padding included.

        Raises:
            RuntimeError: IE0002 if LLVM cannot size the layout.
        """
        try:
            size = geometry_type.llvm_type.get_abi_size(self.target_data)
        except RuntimeError as e:
            raise_internal_error("IE0002", name=geometry_type.name, reason=str(e))
        if size <= 0:
            raise_internal_error("IE0002", name=geometry_type.name,
                                 reason=f"size {size} is not positive")
        return size

    def size_entry(self, geometry_type: GeometryType) -> SizeEntry:
        return SizeEntry(geometry_type.name, self.get_type_size_bytes(geometry_type))


def collect_size_entries(
    types: Iterable[GeometryType] = GEOMETRY_TYPES,
    target_data: Optional[llvm.TargetData] = None,
) -> List[SizeEntry]:
    """Size every registered type, keeping registration order.

    Args:
        types: Types to size (default: the full registry).
        target_data: Data layout to use (default: the host's).
    """
    if target_data is None:
        target_data = TargetManager().target_data()
    sizing = TypeSizing(target_data)
    return [sizing.size_entry(geometry_type) for geometry_type in types]
