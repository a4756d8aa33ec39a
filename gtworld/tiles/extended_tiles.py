"""
Extra tile data shapes for machines, pets, storage and event blocks
"""

from dataclasses import dataclass, field
from typing import List

from construct import Bytes, Int8ul, Int32ul, Struct

from ..common_types import Record
from ..cursor import Cursor
from ..errors import EncodeError
from .base_decoder import TileData, wire

STORAGE_ITEM_SIZE = 13


# Sub-records

@dataclass
class FishInfo(Record):
    LAYOUT = Struct(
        "fish_item_id" / Int32ul,
        "lbs" / Int32ul,
    )
    fish_item_id: int = 0
    lbs: int = 0


@dataclass
class SilkWormColor(Record):
    """ARGB colour stored as a little-endian u32"""
    LAYOUT = Struct(
        "b" / Int8ul,
        "g" / Int8ul,
        "r" / Int8ul,
        "a" / Int8ul,
    )
    b: int = 0
    g: int = 0
    r: int = 0
    a: int = 0

    @property
    def argb(self) -> int:
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b


@dataclass
class StorageBlockItem(Record):
    LAYOUT = Struct(
        "unknown_1" / Bytes(3),
        "item_id" / Int32ul,
        "unknown_2" / Bytes(2),
        "amount" / Int32ul,
    )
    unknown_1: bytes = b'\x00' * 3
    item_id: int = 0
    unknown_2: bytes = b'\x00' * 2
    amount: int = 0


@dataclass
class CookingOvenIngredient(Record):
    LAYOUT = Struct(
        "item_id" / Int32ul,
        "time_added" / Int32ul,
    )
    item_id: int = 0
    time_added: int = 0


@dataclass
class CyBotCommand(Record):
    LAYOUT = Struct(
        "command_id" / Int32ul,
        "is_command_used" / Int32ul,
        "unknown_1" / Bytes(7),
    )
    command_id: int = 0
    is_command_used: int = 0
    unknown_1: bytes = b'\x00' * 7


# Payloads

@dataclass
class FishTankPort(TileData):
    """
    Fish tank contents

    fish_count on the wire counts u32 values, two per fish. A decoded count
    is written back unchanged while it still matches the fish list, so an
    odd count survives a round trip.
    """
    TAG = 25
    flags: int = wire('u8')
    fish_count: int = wire('u32')
    fishes: List[FishInfo] = field(default_factory=list)

    @classmethod
    def decode(cls, cursor: Cursor, foreground_item_id: int = 0) -> 'FishTankPort':
        flags = cursor.read_u8()
        fish_count = cursor.read_u32()
        fishes = [FishInfo.read(cursor) for _ in range(fish_count // 2)]
        return cls(flags=flags, fish_count=fish_count, fishes=fishes)

    def encode(self, cursor: Cursor) -> None:
        cursor.write_u8(self.flags)
        fish_count = self.fish_count
        if fish_count // 2 != len(self.fishes):
            fish_count = len(self.fishes) * 2
        cursor.write_u32(fish_count)
        for fish in self.fishes:
            fish.write(cursor)


@dataclass
class SolarCollector(TileData):
    TAG = 26
    unknown_1: bytes = wire(5)


@dataclass
class Forge(TileData):
    TAG = 27
    temperature: int = wire('u32')


@dataclass
class SteamOrgan(TileData):
    TAG = 30
    instrument_type: int = wire('u8')
    note: int = wire('u32')


@dataclass
class SilkWorm(TileData):
    TAG = 31
    worm_type: int = wire('u8')
    name: str = wire('str')
    age: int = wire('u32')
    unknown_1: int = wire('u32')
    unknown_2: int = wire('u32')
    can_be_fed: int = wire('u8')
    color: SilkWormColor = wire(SilkWormColor)
    sick_duration: int = wire('u32')


@dataclass
class SewingMachine(TileData):
    TAG = 32
    bolt_count: int = wire('u16')
    bolt_id_list: List[int] = wire('u32', count='bolt_count')


@dataclass
class LobsterTrap(TileData):
    TAG = 34


@dataclass
class PaintingEasel(TileData):
    TAG = 35
    item_id: int = wire('u32')
    label: str = wire('str')


@dataclass
class PetBattleCage(TileData):
    TAG = 36
    label: str = wire('str')
    base_pet: int = wire('u32')
    combined_pet_1: int = wire('u32')
    combined_pet_2: int = wire('u32')


@dataclass
class PetTrainer(TileData):
    TAG = 37
    name: str = wire('str')
    pet_total_count: int = wire('u32')
    unknown_1: int = wire('u32')
    pets_id: List[int] = wire('u32', count='pet_total_count')


@dataclass
class SteamEngine(TileData):
    TAG = 38
    temperature: int = wire('u32')


@dataclass
class LockBot(TileData):
    TAG = 39
    time_passed: int = wire('u32')


@dataclass
class SpiritStorageUnit(TileData):
    TAG = 41
    ghost_jar_count: int = wire('u32')


@dataclass
class Shelf(TileData):
    TAG = 43
    top_left_item_id: int = wire('u32')
    top_right_item_id: int = wire('u32')
    bottom_left_item_id: int = wire('u32')
    bottom_right_item_id: int = wire('u32')


@dataclass
class VipEntrance(TileData):
    TAG = 44
    unknown_1: int = wire('u8')
    owner_uid: int = wire('u32')
    access_count: int = wire('u32')
    access_uids: List[int] = wire('u32', count='access_count')


@dataclass
class ChallengeTimer(TileData):
    TAG = 45


@dataclass
class FishWallMount(TileData):
    TAG = 47
    label: str = wire('str')
    item_id: int = wire('u32')
    lb: int = wire('u8')


@dataclass
class Portrait(TileData):
    TAG = 48
    label: str = wire('str')
    unknown_1: int = wire('u32')
    unknown_2: int = wire('u32')
    unknown_3: int = wire('u32')
    unknown_4: int = wire('u32')
    face: int = wire('u32')
    hat: int = wire('u32')
    hair: int = wire('u32')
    unknown_5: int = wire('u16')
    unknown_6: int = wire('u16')


@dataclass
class GuildWeatherMachine(TileData):
    TAG = 49
    unknown_1: int = wire('u32')
    gravity: int = wire('u32')
    flags: int = wire('u8')


@dataclass
class FossilPrepStation(TileData):
    TAG = 50
    unknown_1: int = wire('u32')


@dataclass
class DnaExtractor(TileData):
    TAG = 51


@dataclass
class Howler(TileData):
    TAG = 52


@dataclass
class ChemsynthTank(TileData):
    TAG = 53
    current_chem: int = wire('u32')
    target_chem: int = wire('u32')


@dataclass
class StorageBlock(TileData):
    """
    Storage box contents

    The u16 prefix is a byte length covering 13-byte item records. Bytes
    that do not fill a whole record are kept in ``trailing``.
    """
    TAG = 54
    data_length: int = wire('u16')
    items: List[StorageBlockItem] = field(default_factory=list)
    trailing: bytes = b''

    @classmethod
    def decode(cls, cursor: Cursor, foreground_item_id: int = 0) -> 'StorageBlock':
        data_length = cursor.read_u16()
        items = [
            StorageBlockItem.read(cursor)
            for _ in range(data_length // STORAGE_ITEM_SIZE)
        ]
        trailing = cursor.read_bytes(data_length % STORAGE_ITEM_SIZE)
        return cls(data_length=data_length, items=items, trailing=trailing)

    def encode(self, cursor: Cursor) -> None:
        data_length = len(self.items) * STORAGE_ITEM_SIZE + len(self.trailing)
        if len(self.trailing) >= STORAGE_ITEM_SIZE:
            raise EncodeError(
                f"StorageBlock trailing data must be shorter than "
                f"{STORAGE_ITEM_SIZE} bytes, got {len(self.trailing)}"
            )
        cursor.write_u16(data_length)
        for item in self.items:
            item.write(cursor)
        cursor.write_bytes(self.trailing)


@dataclass
class CookingOven(TileData):
    TAG = 55
    temperature_level: int = wire('u32')
    ingredient_count: int = wire('u32')
    ingredients: List[CookingOvenIngredient] = wire(
        CookingOvenIngredient, count='ingredient_count'
    )
    unknown_1: int = wire('u32')
    unknown_2: int = wire('u32')
    unknown_3: int = wire('u32')


@dataclass
class AudioRack(TileData):
    TAG = 56
    note: str = wire('str')
    volume: int = wire('u32')


@dataclass
class GeigerCharger(TileData):
    TAG = 57
    unknown_1: int = wire('u32')


@dataclass
class AdventureBegins(TileData):
    TAG = 58


@dataclass
class TombRobber(TileData):
    TAG = 59


@dataclass
class BalloonOMatic(TileData):
    TAG = 60
    total_rarity: int = wire('u32')
    team_type: int = wire('u8')


@dataclass
class TrainingPort(TileData):
    TAG = 61
    fish_lb: int = wire('u32')
    fish_status: int = wire('u16')
    fish_id: int = wire('u32')
    fish_total_exp: int = wire('u32')
    fish_level: int = wire('u32')
    unknown_2: int = wire('u32')


@dataclass
class ItemSucker(TileData):
    """Magplant style collectors"""
    TAG = 62
    item_id_to_suck: int = wire('u32')
    item_amount: int = wire('u32')
    flags: int = wire('u16')
    limit: int = wire('u32')


@dataclass
class CyBot(TileData):
    TAG = 63
    sync_timer: int = wire('u32')
    activated: int = wire('u32')
    command_count: int = wire('u32')
    commands: List[CyBotCommand] = wire(CyBotCommand, count='command_count')


@dataclass
class GuildItem(TileData):
    TAG = 65
    unknown_1: bytes = wire(17)


@dataclass
class Growscan(TileData):
    TAG = 66
    unknown_1: int = wire('u8')


@dataclass
class ContainmentFieldPowerNode(TileData):
    TAG = 67
    ghost_jar_count: int = wire('u32')
    unknown_count: int = wire('u32')
    unknown_1: List[int] = wire('u32', count='unknown_count')


@dataclass
class SpiritBoard(TileData):
    TAG = 68
    unknown_1: int = wire('u32')
    unknown_2: int = wire('u32')
    unknown_3: int = wire('u32')


@dataclass
class StormyCloud(TileData):
    TAG = 72
    sting_duration: int = wire('u32')
    is_solid: int = wire('u32')
    non_solid_duration: int = wire('u32')


@dataclass
class TemporaryPlatform(TileData):
    TAG = 73
    unknown_1: int = wire('u32')


@dataclass
class SafeVault(TileData):
    TAG = 74


@dataclass
class AngelicCountingCloud(TileData):
    TAG = 75
    is_raffling: int = wire('u32')
    unknown_1: int = wire('u16')
    ascii_code: int = wire('u8')


@dataclass
class InfinityWeatherMachine(TileData):
    TAG = 77
    interval_minutes: int = wire('u32')
    machine_count: int = wire('u32')
    weather_machine_list: List[int] = wire('u32', count='machine_count')


@dataclass
class PineappleGuzzler(TileData):
    TAG = 79


@dataclass
class KrakenGalacticBlock(TileData):
    TAG = 80
    pattern_index: int = wire('u8')
    unknown_1: int = wire('u32')
    r: int = wire('u8')
    g: int = wire('u8')
    b: int = wire('u8')


@dataclass
class FriendsEntrance(TileData):
    TAG = 81
    owner_user_id: int = wire('u32')
    unknown_1: int = wire('u16')
    unknown_2: int = wire('u16')
