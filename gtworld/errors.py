"""
Exceptions raised while decoding or encoding world data
"""

from typing import Optional


class GTWorldError(Exception):
    """Base class for all gtworld errors"""
    pass


class DecodeError(GTWorldError):
    """
    Base class for decoding errors

    Any DecodeError aborts the whole parse. When raised from inside the tile
    loop the world codec records the failing tile in ``tile_index``.
    """

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset
        self.tile_index: Optional[int] = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.tile_index is not None:
            message = f"{message} (tile {self.tile_index})"
        return message


class TruncatedBuffer(DecodeError):
    """A read needed more bytes than remained in the buffer"""

    def __init__(self, offset: int, requested: int, remaining: int):
        super().__init__(
            f"Truncated buffer at offset {offset}: "
            f"needed {requested} bytes, {remaining} remaining",
            offset
        )
        self.requested = requested
        self.remaining = remaining


class UnknownItem(DecodeError):
    """A tile's foreground item id is not in the item database"""

    def __init__(self, item_id: int, offset: Optional[int] = None):
        super().__init__(f"Item {item_id} not found in item database", offset)
        self.item_id = item_id


class UnknownTileVariant(DecodeError):
    """An extra tile data tag has no registered payload shape"""

    def __init__(self, tag: int, item_id: int, offset: Optional[int] = None):
        super().__init__(
            f"No tile data shape registered for type {tag} (item {item_id})",
            offset
        )
        self.tag = tag
        self.item_id = item_id


class InvalidEncoding(DecodeError):
    """A length-prefixed string is not valid in the expected text encoding"""

    def __init__(self, offset: int, encoding: str, reason: str = ""):
        message = f"Invalid {encoding} string at offset {offset}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, offset)
        self.encoding = encoding


class DimensionMismatch(DecodeError):
    """Header tile_count disagrees with width * height (strict mode only)"""

    def __init__(self, width: int, height: int, tile_count: int):
        super().__init__(
            f"tile_count {tile_count} does not match {width}x{height}"
        )
        self.width = width
        self.height = height
        self.tile_count = tile_count


class TrailingData(DecodeError):
    """Bytes remain after the world footer (strict mode only)"""

    def __init__(self, offset: int, remaining: int):
        super().__init__(
            f"{remaining} unread bytes after world footer at offset {offset}",
            offset
        )
        self.remaining = remaining


class EncodeError(GTWorldError):
    """A value cannot be represented in its wire field"""
    pass
