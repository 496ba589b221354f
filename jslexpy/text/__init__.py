"""Source offsets and ranges."""

from jslexpy.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "TextRange",
    "TextSize",
    "slice_text_range",
]
