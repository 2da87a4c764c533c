"""Allow ``python -m lineup`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m lineup`` behaves identically to the ``lineup``
console script.
"""

from __future__ import annotations

from lineup.cli.app import cli

if __name__ == "__main__":
    cli()
