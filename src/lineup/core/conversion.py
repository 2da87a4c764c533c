"""Compose tokenizer and formatter into a single conversion run.

Tokenization completes fully before formatting begins, so a failing
input never produces partial output.
"""

from __future__ import annotations

from dataclasses import dataclass

from lineup.core.formatter import format_items
from lineup.core.models import InputFormat, OutputFormat
from lineup.core.tokenizer import tokenize


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of one :func:`convert` call."""

    output: bytes
    """Rendered UTF-8 bytes."""

    item_count: int
    """Number of items read from the input."""

    line_count: int
    """Number of output lines produced (``0`` for no items)."""


def _count_lines(item_count: int, items_per_line: int) -> int:
    if item_count == 0:
        return 0
    if items_per_line == 0:
        return 1
    return -(-item_count // items_per_line)


def convert(
    data: bytes,
    in_fmt: InputFormat,
    out_fmt: OutputFormat,
) -> ConversionResult:
    """Tokenize *data* with *in_fmt* and render the items with *out_fmt*.

    Raises
    ------
    TokenizeError
        Propagated unchanged from :func:`~lineup.core.tokenizer.tokenize`.
    """
    items = tokenize(data, in_fmt)
    return ConversionResult(
        output=format_items(items, out_fmt),
        item_count=len(items),
        line_count=_count_lines(len(items), out_fmt.line_layout.items_per_line),
    )
