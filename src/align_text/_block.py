"""Two-stage alignment of a block of text.

The text is first justified within its own width ("inner"), then the
justified block is positioned within the target columns ("outer").
"""

from __future__ import annotations

from typing import Iterable

from ._align import Alignment, Bias, Columns, align


def align_block(
    lines: Iterable[str],
    /,
    *,
    outer: Alignment,
    inner: Alignment,
    columns: Columns | None,
    trim: bool = False,
    bias: Bias = Bias.LEFT,
    keep_spaces: bool = False,
) -> list[str]:
    """Justify lines inside the block, then place the block within ``columns``.

    Parameters
    ----------
    lines
        Raw input lines.
    outer
        Where the block goes within ``columns``.
    inner
        How lines are aligned against each other inside the block.
    columns
        Final column policy, or ``None`` for the text's own width.
    trim
        Strip whitespace around each line first.
    bias
        Centering bias, used by both stages.
    keep_spaces
        Keep trailing padding in the output.

    Notes
    -----
    When both stages center, a single centering pass is made.

    Raises
    ------
    InsufficientWidthError
        Propagated from the outer stage.

    Returns
    -------
    list[str]
        The aligned lines.
    """

    if outer is Alignment.CENTER and inner is Alignment.CENTER:
        return align(
            lines,
            Alignment.CENTER,
            columns,
            trim=trim,
            bias=bias,
            keep_spaces=keep_spaces,
        )

    # the outer stage needs lines of uniform width
    justified = align(lines, inner, None, trim=trim, bias=bias, keep_spaces=True)
    placed = align(
        justified,
        outer,
        columns,
        trim=False,
        bias=bias,
        keep_spaces=keep_spaces,
    )

    if not keep_spaces:
        placed = [line.rstrip() for line in placed]

    return placed
