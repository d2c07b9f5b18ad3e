"""Line alignment core.

Pads lines of text with spaces so that they sit left, center or right
within a common width. Everything here is pure: no I/O, no global state.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Iterable


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Bias(Enum):
    """Side the content leans toward when it cannot be centered exactly."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> int:
        return 1 if self is Bias.RIGHT else 0


_ALIGNMENT_NAMES: Final[dict[str, Alignment]] = {
    "left": Alignment.LEFT,
    "l": Alignment.LEFT,
    "center": Alignment.CENTER,
    "c": Alignment.CENTER,
    "right": Alignment.RIGHT,
    "r": Alignment.RIGHT,
}

_BIAS_NAMES: Final[dict[str, Bias]] = {
    "left": Bias.LEFT,
    "l": Bias.LEFT,
    "right": Bias.RIGHT,
    "r": Bias.RIGHT,
}


class AlignError(ValueError):
    __slots__ = ()

    pass


class InvalidChoiceError(AlignError):
    __slots__ = ()

    pass


class InsufficientWidthError(AlignError):
    """Raised when a fixed width cannot hold the longest line."""

    def __init__(
        self,
        required: int,
        available: int,
        /,
    ) -> None:
        super().__init__(required, available)
        self.required = required
        self.available = available

    def __str__(self) -> str:
        return f"not enough columns: text needs {self.required}, only {self.available} available"


class Columns:
    """Fixed column count, optionally wrapping lines that do not fit.

    Notes
    -----
    Passing ``None`` instead of a ``Columns`` instance to :func:`align`
    derives the width from the longest line.
    """

    __slots__ = (
        "count",
        "wrap",
    )

    def __init__(
        self,
        count: int,
        /,
        *,
        wrap: bool = False,
    ) -> None:
        if count < 0:
            raise ValueError("column count must not be negative")
        self.count = count
        self.wrap = wrap

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Columns):
            return NotImplemented
        return self.count == other.count and self.wrap == other.wrap

    def __hash__(self) -> int:
        return hash((self.count, self.wrap))

    def __repr__(self) -> str:
        return f"Columns({self.count}, wrap={self.wrap})"


def _invalid_choice(
    text: str,
    names: Iterable[str],
    kind: str,
    /,
) -> InvalidChoiceError:
    # full names first, then the single-letter aliases
    accepted = ", ".join(sorted(names, key=lambda name: (len(name) == 1, name)))
    return InvalidChoiceError(f"invalid {kind}: {text!r} (choose from {accepted})")


def parse_alignment(
    text: str,
    /,
) -> Alignment:
    """Parse an alignment name such as ``"Center"`` or ``"c"``.

    Parameters
    ----------
    text
        Full name or single-letter alias, case-insensitive.

    Returns
    -------
    Alignment
        The matching alignment mode.
    """

    mode = _ALIGNMENT_NAMES.get(text.strip().lower())
    if mode is None:
        raise _invalid_choice(text, _ALIGNMENT_NAMES, "alignment")
    return mode


def parse_bias(
    text: str,
    /,
) -> Bias:
    """Parse a bias name such as ``"right"`` or ``"R"``."""

    bias = _BIAS_NAMES.get(text.strip().lower())
    if bias is None:
        raise _invalid_choice(text, _BIAS_NAMES, "bias")
    return bias


def wrap_lines(
    lines: Iterable[str],
    width: int,
    /,
) -> list[str]:
    """Split every line into consecutive chunks of at most ``width`` characters.

    Parameters
    ----------
    lines
        Lines to split. Relative order is preserved.
    width
        Chunk size. ``0`` is treated as ``1`` (one character per line).

    Returns
    -------
    list[str]
        The chunks. An empty line yields a single empty line.
    """

    size = max(width, 1)
    chunks: list[str] = []
    for line in lines:
        if not line:
            chunks.append(line)
            continue
        chunks.extend(line[start : start + size] for start in range(0, len(line), size))
    return chunks


def align(
    lines: Iterable[str],
    mode: Alignment,
    columns: Columns | None = None,
    /,
    *,
    trim: bool = False,
    bias: Bias = Bias.LEFT,
    keep_spaces: bool = True,
) -> list[str]:
    """Align each line within a common width by inserting spaces around it.

    Parameters
    ----------
    lines
        Lines to align. The input is never modified; a new list is returned.
    mode
        Where to place each line.
    columns
        Fixed column policy, or ``None`` to use the longest line's length.
    trim
        Strip whitespace around each line before measuring.
    bias
        Which side the text leans toward when centering leaves an odd
        number of spaces. ``Bias.RIGHT`` puts the extra space before the
        text, ``Bias.LEFT`` puts it after.
    keep_spaces
        Append the right-hand padding. When False lines are only padded on
        the left.

    Raises
    ------
    InsufficientWidthError
        If ``columns`` is narrower than the longest line and wrapping is
        disabled.

    Returns
    -------
    list[str]
        The aligned lines, in input order.
    """

    block: list[str] = [line.strip() if trim else line for line in lines]
    if not block:
        return []

    content_width = max(len(line) for line in block)

    if columns is None:
        width = content_width
    elif columns.count >= content_width:
        width = columns.count
    elif columns.wrap:
        block = wrap_lines(block, columns.count)
        width = max(columns.count, 1)
    else:
        raise InsufficientWidthError(content_width, columns.count)

    aligned: list[str] = []
    for line in block:
        space = width - len(line)

        if mode is Alignment.LEFT:
            before = 0
        elif mode is Alignment.CENTER:
            before = (space + bias.offset) // 2
        else:
            before = space
        after = space - before

        if keep_spaces:
            aligned.append(" " * before + line + " " * after)
        else:
            aligned.append(" " * before + line)

    return aligned
