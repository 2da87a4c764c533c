"""Shared utilities — pure text helpers usable by any layer.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from lineup.utils.text import char_count, is_char_boundary

__all__: list[str] = ["char_count", "is_char_boundary"]
