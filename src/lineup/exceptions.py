"""Custom exception hierarchy for lineup.

All exceptions that cross layer boundaries must inherit from
:class:`LineupError`.  Raw ``OSError`` / ``UnicodeDecodeError`` must
NEVER propagate beyond the layer that triggered them — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
LineupError
├── TokenizeError
│   ├── InvalidUtf8Error
│   ├── MisalignedBoundaryError
│   └── TruncatedTailError
├── InvalidConfigurationError
└── StreamError
"""

from __future__ import annotations


class LineupError(Exception):
    """Base exception for all lineup errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Tokenization ----------------------------------------------------------

class TokenizeError(LineupError):
    """Raised when the input stream cannot be split into items."""

    kind: str = "tokenize"
    """Stable, machine-readable name of the failure kind."""


class InvalidUtf8Error(TokenizeError):
    """Raised when the input byte sequence is not valid UTF-8."""

    kind = "invalid-utf8"

    def __init__(self, position: int, *, hint: str | None = None) -> None:
        super().__init__(
            f"input is not valid UTF-8 (byte offset {position})",
            hint=hint,
        )
        self.position: int = position


class MisalignedBoundaryError(TokenizeError):
    """Raised when a fixed-width cut falls inside a multi-byte character."""

    kind = "misaligned-boundary"

    def __init__(self, offset: int, width: int) -> None:
        super().__init__(
            f"item boundary at byte offset {offset} splits a multi-byte "
            f"character (width {width})",
            hint="Choose a byte width that matches the encoded item size.",
        )
        self.offset: int = offset
        self.width: int = width


class TruncatedTailError(TokenizeError):
    """Raised when fixed-width splitting leaves a short final chunk."""

    kind = "truncated-tail"

    def __init__(self, remaining: int, width: int) -> None:
        super().__init__(
            f"trailing {remaining} byte(s) do not fill an item of width {width}",
            hint="Check the input for a missing or extra character.",
        )
        self.remaining: int = remaining
        self.width: int = width


# --- Configuration ---------------------------------------------------------

class InvalidConfigurationError(LineupError):
    """Raised when a separator, pad, anchor, or count value is malformed."""


# --- Process streams -------------------------------------------------------

class StreamError(LineupError):
    """Raised when reading stdin or writing stdout fails at the OS level."""
