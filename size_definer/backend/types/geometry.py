"""Registry of the Qt geometry types whose sizes are emitted.

Each type is described by its data members as an LLVM literal struct, so
the host's data layout (not a hand-written table) decides padding and
alignment. Registration order is emission order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from llvmlite import ir

from size_definer.backend.constants import C_INT_BIT_WIDTH

C_INT = ir.IntType(C_INT_BIT_WIDTH)


@dataclass(frozen=True)
class GeometryType:
    """An external class reduced to its ordered data members."""
    name: str
    fields: Tuple[Tuple[str, ir.Type], ...]

    @property
    def llvm_type(self) -> ir.LiteralStructType:
        return ir.LiteralStructType([field_type for _, field_type in self.fields])


# QPoint: int xp, yp (qpoint.h)
QPOINT = GeometryType("QPoint", (("xp", C_INT), ("yp", C_INT)))

# QRect stores corners, not width/height: int x1, y1, x2, y2 (qrect.h)
QRECT = GeometryType("QRect", (
    ("x1", C_INT),
    ("y1", C_INT),
    ("x2", C_INT),
    ("y2", C_INT),
))

GEOMETRY_TYPES: Tuple[GeometryType, ...] = (QPOINT, QRECT)
