"""Core layer — pure tokenizing and formatting logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or process-stream I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from lineup.core.conversion import ConversionResult, convert
from lineup.core.formatter import format_items, group_lines, pad_item, render
from lineup.core.models import (
    Anchor,
    FixedWidth,
    InputFormat,
    ItemSeparatorSpec,
    LineLayout,
    LiteralSeparator,
    OutputFormat,
    PadSpec,
)
from lineup.core.tokenizer import iter_items, tokenize

__all__: list[str] = [
    "Anchor",
    "ConversionResult",
    "FixedWidth",
    "InputFormat",
    "ItemSeparatorSpec",
    "LineLayout",
    "LiteralSeparator",
    "OutputFormat",
    "PadSpec",
    "convert",
    "format_items",
    "group_lines",
    "iter_items",
    "pad_item",
    "render",
    "tokenize",
]
