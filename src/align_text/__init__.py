"""Align lines of text within a number of columns.

Only the public alignment functions, their types and the CLI entry point
are exported here.
"""

from ._align import (
    AlignError,
    Alignment,
    Bias,
    Columns,
    InsufficientWidthError,
    InvalidChoiceError,
    align,
    parse_alignment,
    parse_bias,
    wrap_lines,
)
from ._block import align_block
from ._cli import main

__all__ = (
    "AlignError",
    "Alignment",
    "Bias",
    "Columns",
    "InsufficientWidthError",
    "InvalidChoiceError",
    "align",
    "align_block",
    "main",
    "parse_alignment",
    "parse_bias",
    "wrap_lines",
)
