"""Boundary validation: raw flag values → core configuration models.

The core receives already-disambiguated, validated models and never
parses text itself.  Every check here raises
:class:`~lineup.exceptions.InvalidConfigurationError`.

Separator disambiguation
------------------------
A single ``--in-separator`` value serves two roles:

* ASCII digits, optionally led by ``+`` → :class:`~lineup.core.models.FixedWidth` (must be > 0)
* anything else     → :class:`~lineup.core.models.LiteralSeparator`
  (must be non-empty and must not start with a digit)
"""

from __future__ import annotations

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
from lineup.exceptions import InvalidConfigurationError

SEPARATOR_HELP: str = (
    "IN format: input item separator. "
    "N: fixed number of bytes per item, no explicit separator "
    "(N must be > 0 and every cut must land on a UTF-8 character boundary). "
    "SEP: string used to separate items; SEP cannot start with a digit."
)


# ---------------------------------------------------------------------------
# Individual values
# ---------------------------------------------------------------------------

def parse_item_separator(text: str) -> ItemSeparatorSpec:
    """Disambiguate *text* into a fixed byte width or a literal separator."""
    digits = text[1:] if text.startswith("+") else text
    if digits.isascii() and digits.isdigit():
        width = int(digits)
        if width <= 0:
            raise InvalidConfigurationError(
                "number of bytes per item must be > 0",
                hint="Use a positive byte count or a non-numeric separator.",
            )
        return FixedWidth(width)

    if not text:
        raise InvalidConfigurationError(
            "input item separator must not be empty",
        )
    if text[0].isascii() and text[0].isdigit():
        raise InvalidConfigurationError(
            f"input item separator {text!r} must not start with a digit",
            hint="Digit-led values are reserved for fixed byte widths.",
        )
    return LiteralSeparator(text)


def parse_pad_char(text: str) -> str:
    """Return *text* if it is exactly one Unicode scalar value."""
    if len(text) != 1:
        raise InvalidConfigurationError(
            f"pad must be a single character, got {text!r}",
        )
    return text


def parse_anchor(text: str) -> Anchor:
    """Map ``left`` / ``right`` (any case) to :class:`Anchor`."""
    try:
        return Anchor(text.strip().lower())
    except ValueError as exc:
        choices = ", ".join(anchor.value for anchor in Anchor)
        raise InvalidConfigurationError(
            f"invalid anchor {text!r}",
            hint=f"Choose one of: {choices}.",
        ) from exc


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise InvalidConfigurationError(f"{name} must be >= 0, got {value}")
    return value


def parse_line_layout(name: str, items_per_line: int, line_separator: str) -> LineLayout:
    """Build a :class:`LineLayout`; *name* labels the flag in messages."""
    return LineLayout(
        items_per_line=_non_negative(name, items_per_line),
        line_separator=line_separator,
    )


# ---------------------------------------------------------------------------
# Composite formats
# ---------------------------------------------------------------------------

def build_input_format(
    separator: str,
    line_n: int,
    line_separator: str,
) -> InputFormat:
    """Validate input-side flags and return an :class:`InputFormat`."""
    return InputFormat(
        item_separator=parse_item_separator(separator),
        line_layout=parse_line_layout("--in-line-n", line_n, line_separator),
    )


def build_output_format(
    *,
    span: int,
    pad: str,
    anchor: str,
    separator: str,
    line_n: int,
    line_separator: str,
) -> OutputFormat:
    """Validate output-side flags and return an :class:`OutputFormat`.

    ``pad`` and ``anchor`` are still validated when ``span`` is 0 so a
    typo is reported even if it has no effect on this run.
    """
    return OutputFormat(
        pad=PadSpec(
            span=_non_negative("--out-span", span),
            pad_char=parse_pad_char(pad),
            anchor=parse_anchor(anchor),
        ),
        item_separator=separator,
        line_layout=parse_line_layout("--out-line-n", line_n, line_separator),
    )
