import ctypes

import pytest
from llvmlite import ir

from size_definer.backend.sizing import SizeEntry, TypeSizing, collect_size_entries
from size_definer.backend.target import TargetManager
from size_definer.backend.types.geometry import (
    GEOMETRY_TYPES,
    GeometryType,
)
from size_definer.compiler.pipeline import format_size_define, render_size_defines


@pytest.fixture(scope="module")
def target_data():
    return TargetManager().target_data()


def test_registry_order():
    assert [t.name for t in GEOMETRY_TYPES] == ["QPoint", "QRect"]


def test_sizes_match_c_layout(target_data):
    class QPoint(ctypes.Structure):
        _fields_ = [("xp", ctypes.c_int), ("yp", ctypes.c_int)]

    class QRect(ctypes.Structure):
        _fields_ = [(n, ctypes.c_int) for n in ("x1", "y1", "x2", "y2")]

    entries = collect_size_entries(target_data=target_data)
    assert entries == [
        SizeEntry("QPoint", ctypes.sizeof(QPoint)),
        SizeEntry("QRect", ctypes.sizeof(QRect)),
    ]


def test_padding_follows_data_layout(target_data):
    padded = GeometryType("Padded", (("tag", ir.IntType(8)), ("value", ir.IntType(32))))
    assert TypeSizing(target_data).get_type_size_bytes(padded) == 8


def test_entries_are_immutable():
    entry = SizeEntry("QPoint", 8)
    with pytest.raises(AttributeError):
        entry.size_bytes = 4


def test_define_format():
    assert format_size_define(SizeEntry("QPoint", 8)) == "#define QTCW_sizeof_QPoint 8\n"
    assert format_size_define(SizeEntry("QRect", 16), prefix="X") == "#define X_sizeof_QRect 16\n"
    assert render_size_defines([]) == ""


def test_target_machine_is_cached():
    manager = TargetManager()
    first = manager.target_machine()
    assert manager.target_machine() is first
