"""Naming of the emitted preprocessor constants."""

# Namespace prefix shared with the C wrapper sources that include the output.
SIZE_PREFIX = "QTCW"

# One line per registered type: "#define QTCW_sizeof_QPoint 8"
DEFINE_TEMPLATE = "#define {prefix}_sizeof_{name} {size}\n"

# Output is consumed by a C preprocessor; keep it to plain 8-bit text.
OUTPUT_ENCODING = "latin-1"
