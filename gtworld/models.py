"""
World data model: the aggregate returned by parse() and consumed by serialize()
"""

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Dict, List, Optional

from construct import Bytes, Float32l, Int8ul, Int16ul, Int32ul, Struct

from .common_types import Record
from .config import CodecOptions
from .items import ItemDatabase
from .tiles.base_decoder import Basic, TileData
from .tiles.common_tiles import ChemicalSource, Seed

# Sizes of the opaque sections of the world layout
PREAMBLE_SIZE = 6
HEADER_RESERVED_SIZE = 5
DROPPED_RESERVED_SIZE = 12


class TileFlags(IntFlag):
    """Tile flag bits"""
    HAS_EXTRA_DATA = 0x0001
    HAS_PARENT = 0x0002
    WAS_SPLICED = 0x0004
    WILL_SPAWN_SEEDS_TOO = 0x0008
    IS_SEEDLING = 0x0010
    FLIPPED_X = 0x0020
    IS_ON = 0x0040
    IS_OPEN_TO_PUBLIC = 0x0080
    BG_IS_ON = 0x0100
    FG_ALT_MODE = 0x0200
    IS_WET = 0x0400
    GLUED = 0x0800
    ON_FIRE = 0x1000
    PAINTED_RED = 0x2000
    PAINTED_GREEN = 0x4000
    PAINTED_BLUE = 0x8000


class WeatherType(IntEnum):
    DEFAULT = 0
    SUNSET = 1
    NIGHT = 2
    DESERT = 3
    SUNNY = 4
    RAINY_CITY = 5
    HARVEST = 6
    MARS = 7
    SPOOKY = 8
    MAW = 9
    BLANK = 10
    SNOWY = 11
    GROWCH = 12
    GROWCH_HAPPY = 13
    UNDERSEA = 14
    WARP = 15
    COMET = 16
    COMET2 = 17
    PARTY = 18
    PINEAPPLE = 19
    SNOWY_NIGHT = 20
    SPRING = 21
    WOLF = 22
    NOT_INITIALIZED = 23
    PURPLE_HAZE = 24
    FIRE_HAZE = 25
    GREEN_HAZE = 26
    AQUA_HAZE = 27
    CUSTOM_HAZE = 28
    CUSTOM_ITEMS = 29
    PAGODA = 30
    APOCALYPSE = 31
    JUNGLE = 32
    BALLOON_WARZ = 33
    BACKGROUND = 34
    AUTUMN = 35
    HEARTH = 36
    ST_PATRICKS = 37
    ICE_AGE = 38
    VOLCANO = 39
    FLOATING_ISLANDS = 40
    MASCOT = 41
    DIGITAL_RAIN = 42
    MONOCHROME = 43
    TREASURE = 44
    SURGERY = 45
    BOUNTIFUL = 46
    METEOR = 47
    STARS = 48
    ASCENDED = 49
    DESTROYED = 50
    GROWTOPIA_SIGN = 51
    DUNGEON = 52
    LEGENDARY_CITY = 53
    BLOOD_DRAGON = 54
    POP_CITY = 55
    ANZU = 56
    TMNT_CITY = 57
    RAD_CITY = 58
    PLAZE = 59
    NEBULA = 60
    PROTOSTAR = 61
    DARK_MOUNTAINS = 62
    AC15 = 63
    MOUNT_GROWMORE = 64
    CRACK_IN_REALITY = 65
    LNY_NIAN = 66
    RAYMAN_LOCK = 67
    STEAMPUNK = 68
    REALM_OF_SPIRITS = 69
    BLACKHOLE = 70
    GEMS = 71
    HOLIDAY_HAVEN = 72
    FENYX_LOCK = 73
    ENCHANTED_LOCK = 74
    ROYAL_ENCHANTED_LOCK = 75
    NEPTUNES_ATLANTIS = 76
    PINUSKI_PETAL_PERFECT_HAVEN = 77
    CANDYLAND = 78

    @classmethod
    def from_id(cls, value: int) -> 'WeatherType':
        """Map a raw weather id, falling back to DEFAULT for unknown ids"""
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


@dataclass
class Tile:
    """
    One grid cell

    x and y are derived from the tile index at decode time and are not
    serialized. parent_data and trailing_text are present only when the
    tile's flags or foreground item call for them.
    """
    foreground_item_id: int = 0
    background_item_id: int = 0
    parent_block_index: int = 0
    flags: TileFlags = TileFlags(0)
    tile_type: TileData = field(default_factory=Basic)
    parent_data: Optional[int] = None
    trailing_text: Optional[str] = None
    x: int = 0
    y: int = 0

    @property
    def has_extra_data(self) -> bool:
        return bool(self.flags & TileFlags.HAS_EXTRA_DATA)

    @property
    def has_parent(self) -> bool:
        return bool(self.flags & TileFlags.HAS_PARENT)

    @property
    def is_basic(self) -> bool:
        return isinstance(self.tile_type, Basic)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output"""
        data = {
            'x': self.x,
            'y': self.y,
            'foreground_item_id': self.foreground_item_id,
            'background_item_id': self.background_item_id,
            'parent_block_index': self.parent_block_index,
            'flags': int(self.flags),
            'tile_type': self.tile_type.to_dict(),
        }
        if self.parent_data is not None:
            data['parent_data'] = self.parent_data
        if self.trailing_text is not None:
            data['trailing_text'] = self.trailing_text
        return data


@dataclass
class DroppedItem(Record):
    """
    An item lying loose in the world

    Coordinates are kept as their raw f32 bytes so every bit pattern,
    NaN payloads included, is written back unchanged. ``x`` and ``y`` are
    float views over them.
    """
    LAYOUT = Struct(
        "item_id" / Int16ul,
        "x_bits" / Bytes(4),
        "y_bits" / Bytes(4),
        "count" / Int8ul,
        "flags" / Int8ul,
        "uid" / Int32ul,
    )
    item_id: int = 0
    x_bits: bytes = bytes(4)
    y_bits: bytes = bytes(4)
    count: int = 0
    flags: int = 0
    uid: int = 0

    @classmethod
    def at(cls, item_id: int, x: float, y: float,
           count: int = 1, flags: int = 0, uid: int = 0) -> 'DroppedItem':
        """Create an item at a position given in floats"""
        return cls(item_id=item_id, x_bits=Float32l.build(x),
                   y_bits=Float32l.build(y), count=count, flags=flags, uid=uid)

    @property
    def x(self) -> float:
        return Float32l.parse(self.x_bits)

    @x.setter
    def x(self, value: float) -> None:
        self.x_bits = Float32l.build(value)

    @property
    def y(self) -> float:
        return Float32l.parse(self.y_bits)

    @y.setter
    def y(self, value: float) -> None:
        self.y_bits = Float32l.build(value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'item_id': self.item_id,
            'x': self.x,
            'y': self.y,
            'count': self.count,
            'flags': self.flags,
            'uid': self.uid,
        }


@dataclass
class Dropped:
    """Dropped items block; the item count is written from len(items)"""
    last_dropped_item_uid: int = 0
    items: List[DroppedItem] = field(default_factory=list)

    @property
    def items_count(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'items_count': self.items_count,
            'last_dropped_item_uid': self.last_dropped_item_uid,
            'items': [item.to_dict() for item in self.items],
        }


@dataclass
class World:
    """
    A decoded world

    The item database is shared and read-only. It and the options the world
    was decoded with are excluded from equality and repr; serialize() reuses
    those options unless given others. Opaque header and footer sections are
    kept verbatim so the world re-encodes byte for byte.
    """
    name: str = ''
    width: int = 0
    height: int = 0
    tile_count: int = 0
    tiles: List[Tile] = field(default_factory=list)
    dropped: Dropped = field(default_factory=Dropped)
    base_weather: int = 0
    current_weather: int = 0
    preamble: bytes = bytes(PREAMBLE_SIZE)
    header_reserved: bytes = bytes(HEADER_RESERVED_SIZE)
    dropped_reserved: bytes = bytes(DROPPED_RESERVED_SIZE)
    weather_reserved: int = 0
    item_database: Optional[ItemDatabase] = field(
        default=None, compare=False, repr=False
    )
    options: Optional[CodecOptions] = field(
        default=None, compare=False, repr=False
    )

    @property
    def base_weather_type(self) -> WeatherType:
        return WeatherType.from_id(self.base_weather)

    @property
    def current_weather_type(self) -> WeatherType:
        return WeatherType.from_id(self.current_weather)

    def tile_index(self, x: int, y: int) -> Optional[int]:
        """Index of the tile at (x, y), or None when outside the world"""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        index = y * self.width + x
        if index >= len(self.tiles):
            return None
        return index

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        index = self.tile_index(x, y)
        if index is None:
            return None
        return self.tiles[index]

    def is_tile_harvestable(self, tile: Tile) -> bool:
        """
        Whether a seed or chemical source tile is ready

        Requires the item database for the item's grow time. Tiles of any
        other shape, and items missing from the database, are never ready.
        """
        if not isinstance(tile.tile_type, (Seed, ChemicalSource)):
            return False
        if self.item_database is None:
            return False
        item = self.item_database.lookup(tile.foreground_item_id)
        if item is None:
            return False
        return tile.tile_type.is_ready(item.grow_time)

    def is_harvestable(self, x: int, y: int) -> bool:
        tile = self.get_tile(x, y)
        if tile is None:
            return False
        return self.is_tile_harvestable(tile)

    def update_tile(self, x: int, y: int, data: bytes, options=None) -> Tile:
        """
        Decode a single tile record and replace the tile at (x, y)

        Args:
            x: Tile column
            y: Tile row
            data: Encoded tile record, as carried by tile update packets
            options: CodecOptions for string decoding (defaults to the
                options the world was decoded with)

        Returns:
            The decoded tile

        Raises:
            IndexError: If (x, y) is outside the world
            DecodeError: If the record cannot be decoded
        """
        from .world import decode_tile_update

        index = self.tile_index(x, y)
        if index is None:
            raise IndexError(f"Tile ({x}, {y}) outside {self.width}x{self.height} world")
        tile = decode_tile_update(data, self.item_database, x, y,
                                  options or self.options)
        self.tiles[index] = tile
        return tile

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output"""
        return {
            'name': self.name,
            'width': self.width,
            'height': self.height,
            'tile_count': self.tile_count,
            'base_weather': self.base_weather,
            'current_weather': self.current_weather,
            'tiles': [tile.to_dict() for tile in self.tiles],
            'dropped': self.dropped.to_dict(),
        }
