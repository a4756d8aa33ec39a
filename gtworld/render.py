"""
World preview rendering
Paints one solid square per tile using item colours from the item database
"""

import logging
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from .items import ItemDatabase
from .models import Tile, World

logger = logging.getLogger(__name__)

SKY_COLOR = (96, 215, 242, 255)
MISSING_COLOR = (255, 255, 0, 255)


def unpack_base_color(color: int) -> Tuple[int, int, int, int]:
    """Convert a packed item colour (blue, green, red from the high byte) to RGBA"""
    blue = (color >> 24) & 0xFF
    green = (color >> 16) & 0xFF
    red = (color >> 8) & 0xFF
    return red, green, blue, 255


def _color_of(item_database: ItemDatabase, item_id: int) -> Optional[Tuple[int, int, int, int]]:
    item = item_database.lookup(item_id)
    if item is None:
        return None
    return unpack_base_color(item.base_color)


def tile_color(tile: Tile, item_database: ItemDatabase) -> Tuple[int, int, int, int]:
    """
    Colour for one tile

    Blank tiles show the sky, or the background block's seed colour when a
    background is present. Other tiles use the foreground block's seed colour.
    Seeds follow their block, so colours are looked up at item_id + 1.
    """
    if tile.foreground_item_id == 0:
        if tile.background_item_id == 0:
            return SKY_COLOR
        color = _color_of(item_database, tile.background_item_id + 1)
    else:
        color = _color_of(item_database, tile.foreground_item_id + 1)
    return color if color is not None else MISSING_COLOR


def render_world(world: World,
                 item_database: Optional[ItemDatabase] = None,
                 pixel_size: int = 32) -> Image.Image:
    """
    Render a world preview

    Args:
        world: Decoded world
        item_database: Item database for colours (defaults to the world's)
        pixel_size: Side of each tile square in pixels

    Returns:
        RGBA image of (width * pixel_size) x (height * pixel_size) pixels
    """
    if item_database is None:
        item_database = world.item_database
    if item_database is None:
        raise ValueError("Rendering needs an item database")
    if pixel_size < 1:
        raise ValueError(f"pixel_size must be positive, got {pixel_size}")

    grid = np.zeros((world.height, world.width, 4), dtype=np.uint8)
    grid[:, :] = MISSING_COLOR
    for tile in world.tiles:
        if tile.x < world.width and tile.y < world.height:
            grid[tile.y, tile.x] = tile_color(tile, item_database)

    pixels = np.repeat(np.repeat(grid, pixel_size, axis=0), pixel_size, axis=1)
    logger.debug(f"Rendered {world.name} at {pixels.shape[1]}x{pixels.shape[0]}")
    return Image.fromarray(pixels)
