"""Command-line interface entry point.

Read lines from standard input, align them within the terminal (or a given
number of columns) and print the result.
"""

from __future__ import annotations

import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from typing import Final

from ._align import (
    Alignment,
    Bias,
    Columns,
    InsufficientWidthError,
    InvalidChoiceError,
    parse_alignment,
    parse_bias,
)
from ._block import align_block
from ._config import (
    AlignOptions,
    env_alignment_default,
    env_bias_default,
    env_columns_default,
)
from ._terminal import (
    TerminalWidthError,
    get_terminal_width,
    read_lines,
    write_lines,
)


class CliArgs(Namespace):
    __slots__ = (
        "outer",
        "inner",
        "align",
        "columns",
        "wrap",
        "trim",
        "keep",
        "bias",
        "debug",
    )

    def __init__(
        self,
        /,
    ) -> None:
        self.outer: Alignment | None = None
        self.inner: Alignment | None = None
        self.align: Alignment | None = None
        self.columns: int | None = None
        self.wrap: bool = False
        self.trim: bool = False
        self.keep: bool = False
        self.bias: Bias | None = None
        self.debug: bool = False


def _alignment_arg(
    text: str,
    /,
) -> Alignment:
    try:
        return parse_alignment(text)
    except InvalidChoiceError as exc:
        raise ArgumentTypeError(str(exc)) from exc


def _bias_arg(
    text: str,
    /,
) -> Bias:
    try:
        return parse_bias(text)
    except InvalidChoiceError as exc:
        raise ArgumentTypeError(str(exc)) from exc


def _build_parser() -> ArgumentParser:
    """Create the CLI argument parser.

    Returns
    -------
    ArgumentParser
        A configured argument parser.
    """

    parser: ArgumentParser = ArgumentParser(
        prog="align-text",
        description=(
            "Aligns a block of text within the terminal (or a specified number of columns)."
        ),
    )

    parser.add_argument(
        "-o",
        "--outer",
        type=_alignment_arg,
        default=None,
        metavar="{left,center,right}",
        help="Where to align the block of text (default: left).",
    )

    parser.add_argument(
        "-i",
        "--inner",
        type=_alignment_arg,
        default=None,
        metavar="{left,center,right}",
        help="Where to align text inside the block (default: left).",
    )

    parser.add_argument(
        "-a",
        "--align",
        type=_alignment_arg,
        default=None,
        metavar="{left,center,right}",
        help=(
            "Shorthand for specifying both '--outer' and '--inner'. "
            "You may also set ALIGN_TEXT_ALIGN."
        ),
    )

    parser.add_argument(
        "-c",
        "--columns",
        type=int,
        default=None,
        help=(
            "Number of columns. Takes the text's width if 0, the terminal's width if unspecified. "
            "You may also set ALIGN_TEXT_COLUMNS."
        ),
    )

    parser.add_argument(
        "-w",
        "--wrap",
        action="store_true",
        help="Wrap the lines of text to fit in the number of columns.",
    )

    parser.add_argument(
        "-t",
        "--trim",
        action="store_true",
        help="Trim the spaces around the lines before aligning.",
    )

    parser.add_argument(
        "-k",
        "--keep",
        action="store_true",
        help="Keep the spaces on the right in the output.",
    )

    parser.add_argument(
        "-b",
        "--bias",
        type=_bias_arg,
        default=None,
        metavar="{left,right}",
        help=(
            "Side to lean toward if a line can't be centered perfectly (default: left). "
            "You may also set ALIGN_TEXT_BIAS."
        ),
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the resolved settings to standard error.",
    )

    return parser


def _resolve_options(
    args: CliArgs,
    /,
) -> AlignOptions:
    """Merge CLI flags with environment defaults."""

    fallback: Alignment = args.align or env_alignment_default()
    columns: int | None = args.columns
    if columns is None:
        columns = env_columns_default()

    return AlignOptions(
        outer=args.outer or fallback,
        inner=args.inner or fallback,
        bias=args.bias or env_bias_default(),
        columns=columns,
        wrap=args.wrap,
        trim=args.trim,
        keep_spaces=args.keep,
    )


def _resolve_columns(
    options: AlignOptions,
    /,
) -> Columns | None:
    """Turn the requested column count into a column policy.

    Raises
    ------
    TerminalWidthError
        If no count was requested and the terminal width is unknown.
    """

    if options.columns is None:
        return Columns(get_terminal_width(), wrap=options.wrap)
    if options.columns == 0:
        return None
    return Columns(options.columns, wrap=options.wrap)


def _print_debug(
    options: AlignOptions,
    columns: Columns | None,
    /,
) -> None:
    stderr = sys.stderr
    print("==== Settings ====", file=stderr)
    print(f"outer: {options.outer.value}", file=stderr)
    print(f"inner: {options.inner.value}", file=stderr)
    print(f"bias: {options.bias.value}", file=stderr)
    if columns is None:
        print("columns: (text width)", file=stderr)
    else:
        print(f"columns: {columns.count}", file=stderr)
    print(f"wrap: {options.wrap}", file=stderr)
    print(f"trim: {options.trim}", file=stderr)
    print(f"keep: {options.keep_spaces}", file=stderr)


def _run(
    options: AlignOptions,
    /,
    *,
    debug: bool = False,
) -> int:
    """Main execution logic.

    Parameters
    ----------
    options
        Resolved settings.
    debug
        Print the resolved settings to standard error.

    Returns
    -------
    int
        Process exit code. 0 indicates success; any other value indicates failure.
    """

    try:
        columns = _resolve_columns(options)
    except TerminalWidthError as exc:
        print(f"{exc}; pass '--columns' explicitly.", file=sys.stderr)
        return 2

    if debug:
        _print_debug(options, columns)

    lines: list[str] = read_lines(sys.stdin)

    try:
        aligned = align_block(
            lines,
            outer=options.outer,
            inner=options.inner,
            columns=columns,
            trim=options.trim,
            bias=options.bias,
            keep_spaces=options.keep_spaces,
        )
    except InsufficientWidthError as exc:
        print(str(exc), file=sys.stderr)
        return 3

    write_lines(aligned, sys.stdout)
    return 0


def main(
    argv: list[str] | None = None,
    /,
) -> None:
    """Script entry point.

    Parse command-line arguments, delegate to the execution logic, and exit with its code.
    """

    parser: Final[ArgumentParser] = _build_parser()
    args = CliArgs()
    parser.parse_args(argv, namespace=args)

    if args.align is not None and (args.outer is not None or args.inner is not None):
        print(
            "'--align' cannot be used together with '--outer' or '--inner'.",
            file=sys.stderr,
        )
        sys.exit(2)

    if args.columns is not None and args.columns < 0:
        print("'--columns' must not be negative.", file=sys.stderr)
        sys.exit(2)

    code: int = _run(_resolve_options(args), debug=args.debug)
    sys.exit(code)
