"""
Extra tile data shapes for the core block families:
doors, signs, locks, farming, boxes and display blocks
"""

from dataclasses import dataclass, field
from typing import List

from ..cursor import Cursor
from .base_decoder import TileData, wire

# Guild lock carries an extra 16-byte block after the regular lock payload
GUILD_LOCK_ITEM_ID = 5814
GUILD_DATA_SIZE = 16


@dataclass
class Door(TileData):
    """Door, portal and entrance blocks"""
    TAG = 1
    text: str = wire('str')
    unknown_1: int = wire('u8')


@dataclass
class Sign(TileData):
    TAG = 2
    text: str = wire('str')
    unknown_1: int = wire('u32')


@dataclass
class Lock(TileData):
    """
    World and area locks

    access_count is written from len(access_uids). guild_data holds the extra
    block that follows the lock payload for the guild lock item only.
    """
    TAG = 3
    settings: int = wire('u8')
    owner_uid: int = wire('u32')
    access_count: int = wire('u32')
    access_uids: List[int] = wire('u32', count='access_count')
    minimum_level: int = wire('u8')
    unknown_1: bytes = wire(7)
    guild_data: bytes = field(default=b'')

    @classmethod
    def decode(cls, cursor: Cursor, foreground_item_id: int = 0) -> 'Lock':
        lock = super().decode(cursor, foreground_item_id)
        if foreground_item_id == GUILD_LOCK_ITEM_ID:
            lock.guild_data = cursor.read_bytes(GUILD_DATA_SIZE)
        return lock

    def encode(self, cursor: Cursor) -> None:
        super().encode(cursor)
        if self.guild_data:
            cursor.write_bytes(self.guild_data, GUILD_DATA_SIZE)


@dataclass
class Seed(TileData):
    TAG = 4
    time_passed: int = wire('u32')
    item_on_tree: int = wire('u8')

    def is_ready(self, grow_time: int) -> bool:
        """Whether the tree can be harvested given the item's grow time"""
        return self.time_passed >= grow_time


@dataclass
class Mailbox(TileData):
    TAG = 6
    unknown_1: str = wire('str')
    unknown_2: str = wire('str')
    unknown_3: str = wire('str')
    unknown_4: int = wire('u8')


@dataclass
class Bulletin(TileData):
    TAG = 7
    unknown_1: str = wire('str')
    unknown_2: str = wire('str')
    unknown_3: str = wire('str')
    unknown_4: int = wire('u8')


@dataclass
class Dice(TileData):
    TAG = 8
    symbol: int = wire('u8')


@dataclass
class ChemicalSource(TileData):
    TAG = 9
    time_passed: int = wire('u32')

    def is_ready(self, grow_time: int) -> bool:
        """Whether the source can be harvested given the item's grow time"""
        return self.time_passed >= grow_time


@dataclass
class AchievementBlock(TileData):
    TAG = 10
    unknown_1: int = wire('u32')
    tile_type: int = wire('u8')


@dataclass
class HeartMonitor(TileData):
    TAG = 11
    unknown_1: int = wire('u32')
    player_name: str = wire('str')


@dataclass
class DonationBox(TileData):
    TAG = 12
    unknown_1: str = wire('str')
    unknown_2: str = wire('str')
    unknown_3: str = wire('str')
    unknown_4: int = wire('u8')


@dataclass
class Mannequin(TileData):
    """Mannequin label and worn clothing item ids"""
    TAG = 14
    text: str = wire('str')
    unknown_1: int = wire('u8')
    clothing_1: int = wire('u32')
    clothing_2: int = wire('u16')
    clothing_3: int = wire('u16')
    clothing_4: int = wire('u16')
    clothing_5: int = wire('u16')
    clothing_6: int = wire('u16')
    clothing_7: int = wire('u16')
    clothing_8: int = wire('u16')
    clothing_9: int = wire('u16')
    clothing_10: int = wire('u16')


@dataclass
class BunnyEgg(TileData):
    TAG = 15
    egg_placed: int = wire('u32')


@dataclass
class GamePack(TileData):
    TAG = 16
    team: int = wire('u8')


@dataclass
class GameGenerator(TileData):
    TAG = 17


@dataclass
class XenoniteCrystal(TileData):
    TAG = 18
    unknown_1: int = wire('u8')
    unknown_2: int = wire('u32')


@dataclass
class PhoneBooth(TileData):
    TAG = 19
    clothing_1: int = wire('u16')
    clothing_2: int = wire('u16')
    clothing_3: int = wire('u16')
    clothing_4: int = wire('u16')
    clothing_5: int = wire('u16')
    clothing_6: int = wire('u16')
    clothing_7: int = wire('u16')
    clothing_8: int = wire('u16')
    clothing_9: int = wire('u16')


@dataclass
class Crystal(TileData):
    TAG = 20
    unknown_1: str = wire('str')


@dataclass
class CrimeInProgress(TileData):
    TAG = 21
    unknown_1: str = wire('str')
    unknown_2: int = wire('u32')
    unknown_3: int = wire('u8')


@dataclass
class DisplayBlock(TileData):
    TAG = 23
    item_id: int = wire('u32')


@dataclass
class VendingMachine(TileData):
    """Vending machine stock item and price"""
    TAG = 24
    item_id: int = wire('u32')
    price: int = wire('i32')


@dataclass
class GivingTree(TileData):
    TAG = 28
    unknown_1: int = wire('u16')
    unknown_2: int = wire('u32')


@dataclass
class CountryFlag(TileData):
    TAG = 33
    country: str = wire('str')


@dataclass
class WeatherMachine(TileData):
    TAG = 40
    settings: int = wire('u32')


@dataclass
class DataBedrock(TileData):
    TAG = 42
    unknown_1: bytes = wire(21)
