"""Render items as padded, separated, line-grouped text.

Pipeline order (enforced by :func:`render`):

1. **Pad** — widen short items to ``span`` scalar values.
2. **Group** — partition items into lines of ``items_per_line``.
3. **Join** — item separator inside a line, line separator between lines.

Formatting is total: a validated :class:`~lineup.core.models.OutputFormat`
never makes these functions fail.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from lineup.core.models import Anchor, LineLayout, OutputFormat, PadSpec
from lineup.utils.text import char_count


# ---------------------------------------------------------------------------
# 1. Pad
# ---------------------------------------------------------------------------

def pad_item(item: str, pad: PadSpec) -> str:
    """Return *item* widened to ``pad.span`` characters.

    Items already at least ``span`` long pass through unchanged; nothing
    is ever truncated.
    """
    if not pad.enabled:
        return item
    missing = pad.span - char_count(item)
    if missing <= 0:
        return item
    fill = pad.pad_char * missing
    if pad.anchor is Anchor.RIGHT:
        return fill + item
    return item + fill


# ---------------------------------------------------------------------------
# 2. Group
# ---------------------------------------------------------------------------

def group_lines(items: Sequence[str], layout: LineLayout) -> list[list[str]]:
    """Partition *items* into consecutive lines; the last may be short."""
    if not items:
        return []
    if layout.is_single_line:
        return [list(items)]
    step = layout.items_per_line
    return [list(items[i:i + step]) for i in range(0, len(items), step)]


# ---------------------------------------------------------------------------
# 3. Join
# ---------------------------------------------------------------------------

def render(items: Iterable[str], fmt: OutputFormat) -> str:
    """Run the full pad → group → join pipeline and return text."""
    padded = [pad_item(item, fmt.pad) for item in items]
    lines = group_lines(padded, fmt.line_layout)
    return fmt.line_layout.line_separator.join(
        fmt.item_separator.join(line) for line in lines
    )


def format_items(items: Iterable[str], fmt: OutputFormat) -> bytes:
    """Render *items* and encode the result as UTF-8."""
    return render(items, fmt).encode("utf-8")
