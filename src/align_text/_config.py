"""Default settings and environment overrides.

Command-line flags take precedence over the ``ALIGN_TEXT_*`` environment
variables, which take precedence over the built-in defaults.
"""

from __future__ import annotations

from os import environ
from typing import Final, Mapping

from ._align import (
    Alignment,
    Bias,
    InvalidChoiceError,
    parse_alignment,
    parse_bias,
)


_DEFAULT_ALIGNMENT: Final[Alignment] = Alignment.LEFT
_DEFAULT_BIAS: Final[Bias] = Bias.LEFT

ENV_ALIGN: Final[str] = "ALIGN_TEXT_ALIGN"
ENV_BIAS: Final[str] = "ALIGN_TEXT_BIAS"
ENV_COLUMNS: Final[str] = "ALIGN_TEXT_COLUMNS"


class AlignOptions:
    """Resolved settings for one run.

    Notes
    -----
    ``columns`` of ``None`` means the terminal width; ``0`` means the
    width of the text itself. Treat all fields as read-only by convention.
    """

    __slots__ = (
        "outer",
        "inner",
        "bias",
        "columns",
        "wrap",
        "trim",
        "keep_spaces",
    )

    def __init__(
        self,
        /,
        *,
        outer: Alignment = _DEFAULT_ALIGNMENT,
        inner: Alignment = _DEFAULT_ALIGNMENT,
        bias: Bias = _DEFAULT_BIAS,
        columns: int | None = None,
        wrap: bool = False,
        trim: bool = False,
        keep_spaces: bool = False,
    ) -> None:
        self.outer = outer
        self.inner = inner
        self.bias = bias
        self.columns = columns
        self.wrap = wrap
        self.trim = trim
        self.keep_spaces = keep_spaces

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"AlignOptions({fields})"


def env_alignment_default(
    env: Mapping[str, str] = environ,
    /,
) -> Alignment:
    """Return the alignment from ``ALIGN_TEXT_ALIGN`` if valid, else the default."""

    raw: str | None = env.get(ENV_ALIGN)
    if raw is None:
        return _DEFAULT_ALIGNMENT
    try:
        return parse_alignment(raw)
    except InvalidChoiceError:
        return _DEFAULT_ALIGNMENT


def env_bias_default(
    env: Mapping[str, str] = environ,
    /,
) -> Bias:
    """Return the bias from ``ALIGN_TEXT_BIAS`` if valid, else the default."""

    raw: str | None = env.get(ENV_BIAS)
    if raw is None:
        return _DEFAULT_BIAS
    try:
        return parse_bias(raw)
    except InvalidChoiceError:
        return _DEFAULT_BIAS


def env_columns_default(
    env: Mapping[str, str] = environ,
    /,
) -> int | None:
    """Return the column count from ``ALIGN_TEXT_COLUMNS`` if valid, else None."""

    raw: str | None = env.get(ENV_COLUMNS)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= 0 else None
