"""
Growtopia world-state decoder and encoder
"""

import logging

from .config import CodecOptions
from .cursor import Cursor
from .errors import (
    DecodeError, DimensionMismatch, EncodeError, GTWorldError,
    InvalidEncoding, TrailingData, TruncatedBuffer, UnknownItem,
    UnknownTileVariant
)
from .items import ItemDatabase, ItemMeta
from .models import Dropped, DroppedItem, Tile, TileFlags, WeatherType, World
from .render import render_world
from .tiles import *  # noqa: F401,F403
from .tiles import __all__ as _tile_names
from .world import WorldCodec, decode_tile_update, parse, serialize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    # Entry points
    'parse',
    'serialize',
    'WorldCodec',
    'decode_tile_update',
    'render_world',

    # Model
    'World',
    'Tile',
    'TileFlags',
    'WeatherType',
    'Dropped',
    'DroppedItem',

    # Item database
    'ItemDatabase',
    'ItemMeta',

    # Infrastructure
    'CodecOptions',
    'Cursor',

    # Errors
    'GTWorldError',
    'DecodeError',
    'TruncatedBuffer',
    'UnknownItem',
    'UnknownTileVariant',
    'InvalidEncoding',
    'DimensionMismatch',
    'TrailingData',
    'EncodeError',

    '__version__',
] + list(_tile_names)
