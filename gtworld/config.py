"""
Codec options
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecOptions:
    """
    Options shared by the world decoder and encoder

    Args:
        text_encoding: Encoding of every length-prefixed string
        strict_dimensions: Raise DimensionMismatch instead of warning when
            tile_count != width * height
        strict_trailing: Raise TrailingData instead of warning when bytes
            follow the world footer
    """
    text_encoding: str = 'utf-8'
    strict_dimensions: bool = False
    strict_trailing: bool = False


DEFAULT_OPTIONS = CodecOptions()
