"""
Single tile decoder/encoder
"""

import logging
from typing import Optional

from ..cursor import Cursor
from ..errors import UnknownItem, UnknownTileVariant
from ..items import ItemDatabase
from ..models import Tile, TileFlags
from .base_decoder import Basic
from .registry import TileTypeRegistry, tile_registry

logger = logging.getLogger(__name__)

# Item whose tiles carry a u32-prefixed string after the payload
TRAILING_TEXT_ITEM_ID = 14666

BASE_TILE_SIZE = 8


class TileCodec:
    """
    Decodes and encodes tile records

    Decoding needs the item database to resolve the foreground item of tiles
    with extra data; encoding never does.
    """

    def __init__(self,
                 item_database: Optional[ItemDatabase],
                 registry: TileTypeRegistry = tile_registry):
        self.item_database = item_database
        self.registry = registry

    def decode(self, cursor: Cursor, x: int = 0, y: int = 0) -> Tile:
        """
        Decode one tile at the cursor position

        Raises:
            TruncatedBuffer: If the tile runs past the end of the buffer
            UnknownItem: If a tile with extra data has an unknown foreground item
            UnknownTileVariant: If the extra tile data type has no shape
        """
        tile = Tile(
            foreground_item_id=cursor.read_u16(),
            background_item_id=cursor.read_u16(),
            parent_block_index=cursor.read_u16(),
            flags=TileFlags(cursor.read_u16()),
            x=x,
            y=y,
        )

        if tile.has_parent:
            tile.parent_data = cursor.read_u16()

        if tile.has_extra_data:
            tile.tile_type = self._decode_extra_data(cursor, tile.foreground_item_id)

        if tile.foreground_item_id == TRAILING_TEXT_ITEM_ID:
            tile.trailing_text = cursor.read_string('u32')

        return tile

    def _decode_extra_data(self, cursor: Cursor, item_id: int):
        offset = cursor.position
        item = self.item_database.lookup(item_id) if self.item_database else None
        if item is None:
            raise UnknownItem(item_id, offset)

        tag = cursor.read_u8()
        payload_class = self.registry.get(tag)
        if payload_class is None:
            raise UnknownTileVariant(tag, item_id, offset)

        category = item.tile_data_type
        if category and category != tag:
            logger.warning(
                f"Item {item_id} ({item.name}) is category {category} "
                f"but tile data at offset {offset} is type {tag}"
            )

        return payload_class.decode(cursor, item_id)

    def encode(self, tile: Tile, cursor: Cursor) -> None:
        """Encode one tile at the end of the cursor buffer"""
        cursor.write_u16(tile.foreground_item_id)
        cursor.write_u16(tile.background_item_id)
        cursor.write_u16(tile.parent_block_index)
        cursor.write_u16(int(tile.flags))

        if tile.parent_data is not None:
            cursor.write_u16(tile.parent_data)

        if not isinstance(tile.tile_type, Basic):
            cursor.write_u8(tile.tile_type.TAG)
            tile.tile_type.encode(cursor)

        if tile.trailing_text is not None:
            cursor.write_string(tile.trailing_text, 'u32')
