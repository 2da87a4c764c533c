"""Stderr console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and the conversion itself
keep working when Rich is not installed.  Stdout is reserved for the
converted items and is never touched here.
"""

from __future__ import annotations

import sys
from typing import Any


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def escape(text: str) -> str:
	"""Escape user-supplied *text* so Rich does not read it as markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with plain-stderr fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		console_class = _load_rich_console_class()
		if console_class is None:
			print(*objects, file=sys.stderr)
			return
		console_class(stderr=True, soft_wrap=True).print(*objects)


console = _ConsoleProxy()
