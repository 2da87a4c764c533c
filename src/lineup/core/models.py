"""Domain models for lineup.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and perform no
validation: values are checked once at the CLI boundary
(:mod:`lineup.cli.options`) before the core ever sees them.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Item separation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FixedWidth:
    """Items are runs of exactly ``width`` bytes with no separator."""

    width: int
    """Bytes per item; always ``> 0``."""


@dataclass(frozen=True, slots=True)
class LiteralSeparator:
    """Items are delimited by a literal separator string."""

    separator: str
    """Non-empty and never starting with an ASCII digit."""


ItemSeparatorSpec = FixedWidth | LiteralSeparator
"""Closed choice of input splitting strategy."""


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class Anchor(enum.Enum):
    """Side an item is pushed toward when it is padded."""

    LEFT = "left"
    """Item at the start, fill after."""

    RIGHT = "right"
    """Item at the end, fill before."""


@dataclass(frozen=True, slots=True)
class LineLayout:
    """Grouping of items into lines."""

    items_per_line: int = 0
    """Items per line; ``0`` means everything is a single line."""

    line_separator: str = ""
    """Delimiter placed between consecutive lines."""

    @property
    def is_single_line(self) -> bool:
        return self.items_per_line == 0


@dataclass(frozen=True, slots=True)
class PadSpec:
    """Fixed-width padding applied to every output item."""

    span: int = 0
    """Minimum width in Unicode scalar values; ``0`` disables padding."""

    pad_char: str = " "
    """Single scalar value used as fill."""

    anchor: Anchor = Anchor.LEFT

    @property
    def enabled(self) -> bool:
        return self.span > 0


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InputFormat:
    """How raw input is partitioned into items."""

    item_separator: ItemSeparatorSpec = field(default_factory=lambda: LiteralSeparator(","))
    line_layout: LineLayout = field(default_factory=LineLayout)


@dataclass(frozen=True, slots=True)
class OutputFormat:
    """How items are rendered back to text."""

    pad: PadSpec = field(default_factory=PadSpec)
    item_separator: str = " "
    line_layout: LineLayout = field(default_factory=LineLayout)
