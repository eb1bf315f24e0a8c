"""Backend constants facade.

Organized by category:
- bit_widths: C integer widths used in type layouts
- naming: prefix and line template of the emitted constants
- exit_codes: process exit codes
"""

from size_definer.backend.constants.bit_widths import C_INT_BIT_WIDTH
from size_definer.backend.constants.naming import (
    SIZE_PREFIX,
    DEFINE_TEMPLATE,
    OUTPUT_ENCODING,
)
from size_definer.backend.constants.exit_codes import (
    EXIT_SUCCESS,
    EXIT_MISSING_FILENAME,
    EXIT_OUTPUT_FILE,
)

__all__ = [
    'C_INT_BIT_WIDTH',
    'SIZE_PREFIX',
    'DEFINE_TEMPLATE',
    'OUTPUT_ENCODING',
    'EXIT_SUCCESS',
    'EXIT_MISSING_FILENAME',
    'EXIT_OUTPUT_FILE',
]
