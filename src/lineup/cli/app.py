"""CLI application entry point for lineup.

This module is the **sole error boundary** for the entire application.
It catches :class:`~lineup.exceptions.LineupError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No tokenizing or formatting logic lives here — all work is delegated
  to the core and infrastructure layers.
* Stdout carries converted output only; every message goes to stderr
  through :data:`~lineup.cli.console.console`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO

from lineup.cli import exit_codes
from lineup.cli.console import console, escape
from lineup.cli.options import SEPARATOR_HELP, build_input_format, build_output_format
from lineup.exceptions import LineupError, TokenizeError
from lineup.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    Values are collected raw; validation happens in :mod:`lineup.cli.options`
    so that malformed values surface as ``InvalidConfigurationError``.
    """
    parser = argparse.ArgumentParser(
        prog="lineup",
        description=(
            "Read items from stdin, split them per the IN format, and write "
            "them to stdout per the OUT format."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a conversion summary on stderr.",
    )

    in_group = parser.add_argument_group("IN format")
    in_group.add_argument("--in-separator", default=",", help=SEPARATOR_HELP)
    in_group.add_argument(
        "--in-line-n",
        type=int,
        default=0,
        help="Items per line; 0 means all items are on a single line.",
    )
    in_group.add_argument(
        "--in-line-separator",
        default="",
        help="Separator string between lines.",
    )

    out_group = parser.add_argument_group("OUT format")
    out_group.add_argument(
        "--out-span",
        type=int,
        default=0,
        help=(
            "Minimum characters per item; shorter items are padded with "
            "--out-pad and anchored per --out-anchor. 0 disables padding."
        ),
    )
    out_group.add_argument("--out-pad", default=" ", help="Pad character.")
    out_group.add_argument(
        "--out-anchor",
        default="left",
        help="Anchor padded items to the 'left' or 'right'.",
    )
    out_group.add_argument(
        "--out-separator",
        default=" ",
        help="Separator string between items within a line.",
    )
    out_group.add_argument(
        "--out-line-n",
        type=int,
        default=0,
        help="Items per line; 0 puts all items on a single line.",
    )
    out_group.add_argument(
        "--out-line-separator",
        default="",
        help="Separator string between lines.",
    )
    return parser


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def _run(
    args: argparse.Namespace,
    stdin: BinaryIO | None,
    stdout: BinaryIO | None,
) -> int:
    """Validate flags, then read → convert → write.

    Flow:
    1. Build and validate the IN/OUT formats.
    2. Read stdin fully into memory.
    3. Tokenize and format (no output on tokenize failure).
    4. Write the rendered bytes to stdout.
    """
    from lineup.core.conversion import convert
    from lineup.infra.streams import read_input, write_output

    in_fmt = build_input_format(
        args.in_separator,
        args.in_line_n,
        args.in_line_separator,
    )
    out_fmt = build_output_format(
        span=args.out_span,
        pad=args.out_pad,
        anchor=args.out_anchor,
        separator=args.out_separator,
        line_n=args.out_line_n,
        line_separator=args.out_line_separator,
    )

    data = read_input(stdin)
    result = convert(data, in_fmt, out_fmt)
    write_output(result.output, stdout)

    if args.verbose:
        console.print(
            f"[dim]{result.item_count} item(s), {result.line_count} line(s), "
            f"{len(data)} byte(s) in, {len(result.output)} byte(s) out[/dim]"
        )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> int:
    """Run the lineup CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin, stdout:
        Binary streams; default to the process streams.  Accepting them
        enables deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _run(args, stdin, stdout)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _describe(exc: LineupError) -> str:
    message = escape(str(exc))
    if isinstance(exc, TokenizeError):
        return f"[bold red]Error ({exc.kind}):[/bold red] {message}"
    return f"[bold red]Error:[/bold red] {message}"


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LineupError as exc:
        console.print(_describe(exc))
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
