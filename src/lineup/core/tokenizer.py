"""Split a UTF-8 byte stream into items.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Splitting pipeline:

1. **Validate** — the whole input must decode as UTF-8 before any
   splitting is attempted.
2. **Group** — with ``items_per_line == 0`` the input is one line;
   otherwise lines are delimited positionally: the last item of every
   group of ``items_per_line`` ends at the line separator.  An empty
   line separator leaves nothing to group on, so the input is split as
   a single line.
3. **Split** — items inside a group are cut by the active
   :data:`~lineup.core.models.ItemSeparatorSpec`.
"""

from __future__ import annotations

from collections.abc import Iterator

from lineup.core.models import FixedWidth, InputFormat, ItemSeparatorSpec, LineLayout
from lineup.exceptions import InvalidUtf8Error, MisalignedBoundaryError, TruncatedTailError
from lineup.utils.text import is_char_boundary


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _validate_utf8(data: bytes) -> None:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8Error(
            exc.start,
            hint="Re-encode the input as UTF-8 before piping it in.",
        ) from exc


def _fixed_cut(data: bytes, start: int, width: int) -> int:
    """Return the end offset of the *width*-byte item starting at *start*.

    Raises
    ------
    TruncatedTailError
        If fewer than *width* bytes remain.
    MisalignedBoundaryError
        If the cut would land inside a multi-byte character.
    """
    remaining = len(data) - start
    if remaining < width:
        raise TruncatedTailError(remaining, width)
    end = start + width
    if not is_char_boundary(data, end):
        raise MisalignedBoundaryError(end, width)
    return end


def _split_single_line(data: bytes, spec: ItemSeparatorSpec) -> Iterator[str]:
    if isinstance(spec, FixedWidth):
        pos = 0
        while pos < len(data):
            end = _fixed_cut(data, pos, spec.width)
            yield data[pos:end].decode("utf-8")
            pos = end
        return

    for chunk in data.split(spec.separator.encode("utf-8")):
        yield chunk.decode("utf-8")


def _closing_fixed_cut(data: bytes, start: int, width: int, line_sep: bytes) -> int:
    """Return the offset just past the line separator ending a group.

    The last item of a group is *width* bytes and must be followed by
    *line_sep* unless the input ends there.

    Raises
    ------
    TruncatedTailError
        If the line separator is not where the group's items end.
    """
    end = _fixed_cut(data, start, width)
    if end == len(data):
        return end
    if not data.startswith(line_sep, end):
        found = data.find(line_sep, start)
        chunk_end = found if found >= 0 else len(data)
        raise TruncatedTailError(chunk_end - start, width)
    return end + len(line_sep)


def _split_grouped(
    data: bytes,
    spec: ItemSeparatorSpec,
    layout: LineLayout,
) -> Iterator[str]:
    """Split *data* into groups closed by a non-empty line separator."""
    size = len(data)
    per_line = layout.items_per_line
    line_sep = layout.line_separator.encode("utf-8")
    pos = 0

    while pos < size:
        for index in range(per_line):
            closing = index == per_line - 1

            if isinstance(spec, FixedWidth):
                if pos >= size:
                    break
                if closing:
                    after = _closing_fixed_cut(data, pos, spec.width, line_sep)
                    yield data[pos:pos + spec.width].decode("utf-8")
                    pos = after
                else:
                    end = _fixed_cut(data, pos, spec.width)
                    yield data[pos:end].decode("utf-8")
                    pos = end
                continue

            delimiter = line_sep if closing else spec.separator.encode("utf-8")
            found = data.find(delimiter, pos)
            if found < 0:
                yield data[pos:].decode("utf-8")
                pos = size
                break
            yield data[pos:found].decode("utf-8")
            pos = found + len(delimiter)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def iter_items(data: bytes, fmt: InputFormat) -> Iterator[str]:
    """Yield the items of *data* in input order.

    UTF-8 validity is checked before the first item is produced.  Empty
    input yields nothing.

    Raises
    ------
    InvalidUtf8Error
        If *data* is not valid UTF-8.
    MisalignedBoundaryError
        If a fixed-width cut falls inside a multi-byte character.
    TruncatedTailError
        If fixed-width splitting leaves a non-empty short tail, or a
        fixed-width line does not end at its line separator.
    """
    data = bytes(data)
    _validate_utf8(data)
    if not data:
        return

    layout = fmt.line_layout
    # Without a line separator, grouping cannot change where items end.
    if layout.is_single_line or not layout.line_separator:
        yield from _split_single_line(data, fmt.item_separator)
    else:
        yield from _split_grouped(data, fmt.item_separator, layout)


def tokenize(data: bytes, fmt: InputFormat) -> list[str]:
    """Split *data* into an ordered list of items.

    Either every item is returned or a
    :class:`~lineup.exceptions.TokenizeError` is raised; there is no
    partial result.
    """
    return list(iter_items(data, fmt))
