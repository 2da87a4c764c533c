"""lineup — re-layout itemised text between input and output formats.

Splits a UTF-8 stream into items (by literal separator or fixed byte
width) and renders them back with padding, anchoring, and line grouping.
"""

from lineup.version import __version__

__all__: list[str] = ["__version__"]
