"""
World decoder/encoder

Layout (little-endian, no padding):

    preamble            6 bytes
    name                u16 length + bytes
    width, height       u32, u32
    tile_count          u32
    header_reserved     5 bytes
    tiles               tile_count tile records
    dropped_reserved    12 bytes
    dropped items       see dropped.py
    base_weather        u16
    weather_reserved    u16
    current_weather     u16
"""

import logging
from typing import Optional

from .config import DEFAULT_OPTIONS, CodecOptions
from .cursor import Cursor
from .dropped import decode_dropped, encode_dropped
from .errors import DecodeError, DimensionMismatch, TrailingData
from .items import ItemDatabase
from .models import (
    DROPPED_RESERVED_SIZE,
    HEADER_RESERVED_SIZE,
    PREAMBLE_SIZE,
    Tile,
    World,
)
from .tiles.codec import TileCodec
from .tiles.registry import TileTypeRegistry, tile_registry
from .utils.logging import get_logger

logger = logging.getLogger(__name__)


class WorldCodec:
    """Decodes world blobs into World objects and encodes them back"""

    def __init__(self,
                 item_database: Optional[ItemDatabase] = None,
                 options: Optional[CodecOptions] = None,
                 registry: TileTypeRegistry = tile_registry):
        """
        Initialize the codec

        Args:
            item_database: Shared item database, required for decoding
            options: Codec options (defaults apply when None)
            registry: Extra tile data registry
        """
        self.item_database = item_database
        self.options = options or DEFAULT_OPTIONS
        self.tile_codec = TileCodec(item_database, registry)

    def decode(self, data: bytes) -> World:
        """
        Decode a complete world

        Raises:
            DecodeError: On any malformed input; no partial world is returned
        """
        cursor = Cursor(data, self.options.text_encoding)

        world = World(item_database=self.item_database, options=self.options)
        world.preamble = cursor.read_bytes(PREAMBLE_SIZE)
        world.name = cursor.read_string()
        world.width = cursor.read_u32()
        world.height = cursor.read_u32()
        world.tile_count = cursor.read_u32()
        world.header_reserved = cursor.read_bytes(HEADER_RESERVED_SIZE)

        log = get_logger(__name__, world=world.name)
        self._check_dimensions(world, log)

        world.tiles = self._decode_tiles(cursor, world, log)

        world.dropped_reserved = cursor.read_bytes(DROPPED_RESERVED_SIZE)
        world.dropped = decode_dropped(cursor)

        world.base_weather = cursor.read_u16()
        world.weather_reserved = cursor.read_u16()
        world.current_weather = cursor.read_u16()

        if not cursor.at_end:
            if self.options.strict_trailing:
                raise TrailingData(cursor.position, cursor.remaining)
            log.warning(
                f"Ignoring {cursor.remaining} bytes after world footer "
                f"at offset {cursor.position}"
            )

        log.debug(
            f"Decoded {world.width}x{world.height} world: "
            f"{len(world.tiles)} tiles, {world.dropped.items_count} dropped items"
        )
        return world

    def _check_dimensions(self, world: World, log) -> None:
        if world.tile_count == world.width * world.height:
            return
        if self.options.strict_dimensions:
            raise DimensionMismatch(world.width, world.height, world.tile_count)
        log.warning(
            f"tile_count {world.tile_count} does not match "
            f"{world.width}x{world.height}, using tile_count"
        )

    def _decode_tiles(self, cursor: Cursor, world: World, log):
        tiles = []
        width = world.width or 1
        for index in range(world.tile_count):
            x, y = index % width, index // width
            try:
                tiles.append(self.tile_codec.decode(cursor, x, y))
            except DecodeError as e:
                e.tile_index = index
                log.error(f"Failed to decode tile {index} at ({x}, {y}): {e}")
                raise
        return tiles

    def encode(self, world: World) -> bytes:
        """Encode a world; the stored tile payloads are authoritative"""
        cursor = Cursor(encoding=self.options.text_encoding)

        cursor.write_bytes(world.preamble, PREAMBLE_SIZE)
        cursor.write_string(world.name)
        cursor.write_u32(world.width)
        cursor.write_u32(world.height)
        cursor.write_u32(world.tile_count)
        cursor.write_bytes(world.header_reserved, HEADER_RESERVED_SIZE)

        if len(world.tiles) != world.tile_count:
            logger.warning(
                f"World {world.name!r} has {len(world.tiles)} tiles "
                f"but tile_count is {world.tile_count}"
            )
        for tile in world.tiles:
            self.tile_codec.encode(tile, cursor)

        cursor.write_bytes(world.dropped_reserved, DROPPED_RESERVED_SIZE)
        encode_dropped(world.dropped, cursor)

        cursor.write_u16(world.base_weather)
        cursor.write_u16(world.weather_reserved)
        cursor.write_u16(world.current_weather)
        return cursor.getvalue()


def parse(data: bytes,
          item_database: ItemDatabase,
          options: Optional[CodecOptions] = None) -> World:
    """
    Decode a world blob

    Args:
        data: Raw world bytes
        item_database: Shared, read-only item database
        options: Codec options

    Returns:
        The decoded World, holding a reference to item_database

    Raises:
        DecodeError: TruncatedBuffer, UnknownItem, UnknownTileVariant,
            InvalidEncoding, or a strict-mode error
    """
    return WorldCodec(item_database, options).decode(data)


def serialize(world: World, options: Optional[CodecOptions] = None) -> bytes:
    """
    Encode a world back to bytes

    Without options the world is encoded with the options it was decoded
    with, so text comes back in its original encoding.
    """
    return WorldCodec(world.item_database, options or world.options).encode(world)


def decode_tile_update(data: bytes,
                       item_database: Optional[ItemDatabase],
                       x: int = 0,
                       y: int = 0,
                       options: Optional[CodecOptions] = None) -> Tile:
    """Decode a standalone tile record, such as the body of a tile update"""
    options = options or DEFAULT_OPTIONS
    cursor = Cursor(data, options.text_encoding)
    return TileCodec(item_database).decode(cursor, x, y)
