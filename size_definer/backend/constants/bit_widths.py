"""C integer bit widths as seen by LLVM.

Used with ir.IntType(width) when describing the data members of the
registered geometry types.
"""

# Every target Qt supports uses a 32-bit C int (ILP32, LP64 and LLP64).
C_INT_BIT_WIDTH = 32
