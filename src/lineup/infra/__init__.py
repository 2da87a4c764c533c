"""Infrastructure layer — process stream integration.

Every raw ``OSError`` raised while touching stdin/stdout must be caught
here and re-raised as a :class:`~lineup.exceptions.LineupError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from lineup.infra.streams import read_input, write_output

__all__: list[str] = ["read_input", "write_output"]
