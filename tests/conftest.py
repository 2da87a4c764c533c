"""Shared pytest fixtures and configuration for the lineup test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests use in-memory binary streams, never the real stdin/stdout.
"""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest


@pytest.fixture()
def stdout() -> io.BytesIO:
    """Empty in-memory binary sink."""
    return io.BytesIO()


@pytest.fixture()
def make_stdin() -> Callable[[str | bytes], io.BytesIO]:
    """Factory wrapping text (UTF-8 encoded when ``str``) as a binary stream."""

    def _make(text: str | bytes) -> io.BytesIO:
        data = text.encode("utf-8") if isinstance(text, str) else text
        return io.BytesIO(data)

    return _make
