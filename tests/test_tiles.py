"""
Tests for extra tile data shapes and the single tile codec
"""

import logging
import struct

import pytest

from gtworld import (
    Basic, CookingOven, CookingOvenIngredient, Cursor, CyBot, CyBotCommand,
    DataBedrock, Door, EncodeError, FishInfo, FishTankPort, GuildItem, Lock,
    Mannequin, PetTrainer, Seed, SilkWorm, SilkWormColor, StorageBlock,
    StorageBlockItem, TileFlags, TruncatedBuffer, UnknownItem,
    UnknownTileVariant, VendingMachine, tile_registry
)
from gtworld.common_types import Record
from gtworld.tiles.codec import TileCodec
from gtworld.tiles.common_tiles import GUILD_LOCK_ITEM_ID

from helpers import create_lock_payload, create_tile, pack_string


def encode_payload(payload) -> bytes:
    cursor = Cursor()
    payload.encode(cursor)
    return cursor.getvalue()


def decode_payload(payload_class, data: bytes, item_id: int = 0):
    cursor = Cursor(data)
    payload = payload_class.decode(cursor, item_id)
    assert cursor.at_end, f"{payload_class.__name__} left {cursor.remaining} bytes"
    return payload


def sample_value(kind, seed: int):
    """Distinct non-zero value of a wire kind"""
    if isinstance(kind, type) and issubclass(kind, Record):
        return kind.unpack(bytes((seed + i) % 255 + 1 for i in range(kind.size())))
    if isinstance(kind, int):
        return bytes((seed + i) % 255 + 1 for i in range(kind))
    if kind in ('str', 'str32'):
        return f'text {seed}'
    if kind == 'i32':
        return -seed
    if kind == 'f32':
        return seed + 0.5
    return seed


def build_sample(payload_class):
    """Instance with every wire field set to a distinct non-zero value"""
    wire_fields = payload_class.wire_fields()
    count_names = {f.metadata['count'] for f in wire_fields if 'count' in f.metadata}
    values = {}
    for index, f in enumerate(wire_fields, start=1):
        kind = f.metadata['wire']
        if f.name in count_names:
            values[f.name] = 2
        elif 'count' in f.metadata:
            values[f.name] = [sample_value(kind, index), sample_value(kind, index + 50)]
        else:
            values[f.name] = sample_value(kind, index)
    payload = payload_class(**values)

    # Shapes whose lists are not declared through wire()
    if payload_class is Lock:
        payload.guild_data = bytes(range(1, 17))
    elif payload_class is FishTankPort:
        payload.fish_count = 4
        payload.fishes = [FishInfo(3000, 5), FishInfo(3002, 7)]
    elif payload_class is StorageBlock:
        payload.data_length = 28
        payload.items = [
            StorageBlockItem(b'\x01\x02\x03', 2, b'\x04\x05', 200),
            StorageBlockItem(b'\x06\x07\x08', 4, b'\x09\x0a', 15),
        ]
        payload.trailing = b'\x0b\x0c'
    return payload


class TestPayloadLayouts:
    """Test field order and widths of individual shapes"""

    def test_door(self):
        data = pack_string('EXIT') + b'\x07'
        door = decode_payload(Door, data)

        assert door == Door(text='EXIT', unknown_1=7)
        assert encode_payload(door) == data

    def test_lock_with_access_list(self):
        data = create_lock_payload(settings=0x81, owner_uid=1000,
                                   access_uids=[7, 8], minimum_level=12,
                                   unknown=b'\x01\x02\x03\x04\x05\x06\x07')[1:]
        lock = decode_payload(Lock, data, 242)

        assert lock.settings == 0x81
        assert lock.owner_uid == 1000
        assert lock.access_count == 2
        assert lock.access_uids == [7, 8]
        assert lock.minimum_level == 12
        assert lock.unknown_1 == b'\x01\x02\x03\x04\x05\x06\x07'
        assert lock.guild_data == b''
        assert encode_payload(lock) == data

    def test_guild_lock_reads_extra_block(self):
        guild_data = bytes(range(16))
        data = create_lock_payload()[1:] + guild_data
        lock = decode_payload(Lock, data, 5814)

        assert lock.guild_data == guild_data
        assert encode_payload(lock) == data

    def test_regular_lock_ignores_guild_block(self):
        data = create_lock_payload()[1:] + bytes(16)
        cursor = Cursor(data)
        Lock.decode(cursor, 242)
        assert cursor.remaining == 16

    def test_seed(self):
        seed = decode_payload(Seed, struct.pack('<IB', 40, 3))
        assert seed == Seed(time_passed=40, item_on_tree=3)
        assert seed.is_ready(31)
        assert not seed.is_ready(41)

    def test_mannequin(self):
        data = pack_string('Model') + b'\x00' + struct.pack('<I9H', 48, *range(1, 10))
        mannequin = decode_payload(Mannequin, data)

        assert mannequin.text == 'Model'
        assert mannequin.clothing_1 == 48
        assert mannequin.clothing_10 == 9
        assert encode_payload(mannequin) == data

    def test_vending_machine_signed_price(self):
        data = struct.pack('<Ii', 242, -10)
        vending = decode_payload(VendingMachine, data)

        assert vending.item_id == 242
        assert vending.price == -10
        assert encode_payload(vending) == data

    def test_silkworm_color(self):
        data = (
            b'\x01' + pack_string('Wormy') + struct.pack('<III', 100, 0, 0)
            + b'\x01' + struct.pack('<I', 0xFF102030) + struct.pack('<I', 0)
        )
        worm = decode_payload(SilkWorm, data)

        assert worm.name == 'Wormy'
        assert worm.color == SilkWormColor(b=0x30, g=0x20, r=0x10, a=0xFF)
        assert worm.color.argb == 0xFF102030
        assert encode_payload(worm) == data

    def test_cooking_oven_ingredients(self):
        data = (
            struct.pack('<II', 2, 2) + struct.pack('<IIII', 962, 10, 4568, 20)
            + struct.pack('<III', 0, 0, 0)
        )
        oven = decode_payload(CookingOven, data)

        assert oven.ingredients == [
            CookingOvenIngredient(item_id=962, time_added=10),
            CookingOvenIngredient(item_id=4568, time_added=20),
        ]
        assert encode_payload(oven) == data

    def test_cybot_commands(self):
        command = struct.pack('<II', 3, 1) + b'\x09' * 7
        data = struct.pack('<III', 5, 1, 1) + command
        cybot = decode_payload(CyBot, data)

        assert cybot.commands == [
            CyBotCommand(command_id=3, is_command_used=1, unknown_1=b'\x09' * 7)
        ]
        assert encode_payload(cybot) == data

    def test_fixed_opaque_sizes(self):
        assert len(encode_payload(DataBedrock())) == 21
        assert len(encode_payload(GuildItem())) == 17

    def test_truncated_payload(self):
        with pytest.raises(TruncatedBuffer):
            Mannequin.decode(Cursor(pack_string('Model') + b'\x00\x01'))


class TestCountedFields:
    """Test list fields whose length is carried by another field"""

    def test_count_written_from_list_length(self):
        trainer = PetTrainer(name='Rex', pet_total_count=0, unknown_1=0, pets_id=[1, 2])
        data = encode_payload(trainer)

        assert data == pack_string('Rex') + struct.pack('<IIII', 2, 0, 1, 2)
        assert decode_payload(PetTrainer, data).pet_total_count == 2

    def test_fish_tank_counts_values(self):
        data = b'\x00' + struct.pack('<I', 4) + struct.pack('<IIII', 3000, 5, 3002, 7)
        tank = decode_payload(FishTankPort, data)

        assert tank.fish_count == 4
        assert tank.fishes == [FishInfo(3000, 5), FishInfo(3002, 7)]
        assert encode_payload(tank) == data

    def test_fish_tank_odd_count_kept(self):
        data = b'\x01' + struct.pack('<I', 3) + struct.pack('<II', 3000, 5)
        tank = decode_payload(FishTankPort, data)

        assert tank.fish_count == 3
        assert tank.fishes == [FishInfo(3000, 5)]
        assert encode_payload(tank) == data

        tank.fishes.append(FishInfo(3002, 7))
        assert encode_payload(tank)[1:5] == struct.pack('<I', 4)

    def test_storage_block_records(self):
        item = b'\x00\x00\x00' + struct.pack('<I', 2) + b'\x00\x00' + struct.pack('<I', 200)
        data = struct.pack('<H', 26) + item + item
        storage = decode_payload(StorageBlock, data)

        assert len(storage.items) == 2
        assert storage.items[0] == StorageBlockItem(item_id=2, amount=200)
        assert storage.trailing == b''
        assert encode_payload(storage) == data

    def test_storage_block_partial_record(self):
        item = b'\x01\x02\x03' + struct.pack('<I', 2) + b'\x04\x05' + struct.pack('<I', 1)
        data = struct.pack('<H', 15) + item + b'\xaa\xbb'
        storage = decode_payload(StorageBlock, data)

        assert storage.items[0].unknown_1 == b'\x01\x02\x03'
        assert storage.trailing == b'\xaa\xbb'
        assert encode_payload(storage) == data

    def test_storage_block_rejects_long_trailing(self):
        with pytest.raises(EncodeError):
            encode_payload(StorageBlock(trailing=bytes(13)))


class TestRegisteredShapes:
    """Test every registered shape against its own encoding"""

    @pytest.mark.parametrize('tag', sorted(tile_registry.list_supported()))
    def test_default_instance(self, tag):
        payload_class = tile_registry.get(tag)
        payload = payload_class()
        data = encode_payload(payload)

        assert decode_payload(payload_class, data) == payload
        assert payload.to_dict()['type'] == payload_class.__name__

    @pytest.mark.parametrize('tag', sorted(tile_registry.list_supported()))
    def test_populated_instance(self, tag):
        payload_class = tile_registry.get(tag)
        payload = build_sample(payload_class)
        item_id = GUILD_LOCK_ITEM_ID if payload_class is Lock else 0
        data = encode_payload(payload)

        decoded = decode_payload(payload_class, data, item_id)
        assert decoded == payload
        assert encode_payload(decoded) == data

    def test_to_dict_nests_records(self):
        cybot = CyBot(commands=[CyBotCommand(command_id=1, unknown_1=b'\x0a' * 7)])
        data = cybot.to_dict()

        assert data['type'] == 'CyBot'
        assert data['commands'][0]['command_id'] == 1
        assert data['commands'][0]['unknown_1'] == '0a' * 7


class TestTileCodec:
    """Test whole tile records"""

    def test_basic_tile_needs_no_items(self):
        cursor = Cursor(create_tile(2, bg=14))
        tile = TileCodec(None).decode(cursor, 3, 4)

        assert tile.foreground_item_id == 2
        assert tile.background_item_id == 14
        assert isinstance(tile.tile_type, Basic)
        assert (tile.x, tile.y) == (3, 4)
        assert cursor.at_end

    def test_category_item_without_extra_data(self, item_database):
        cursor = Cursor(create_tile(242, flags=TileFlags.IS_ON) + b'\x03')
        tile = TileCodec(item_database).decode(cursor)

        assert isinstance(tile.tile_type, Basic)
        assert cursor.position == 8

    def test_parent_data(self):
        data = create_tile(2, parent=5, flags=TileFlags.HAS_PARENT, parent_data=0x1234)
        tile = TileCodec(None).decode(Cursor(data))

        assert tile.has_parent
        assert tile.parent_data == 0x1234

        cursor = Cursor()
        TileCodec(None).encode(tile, cursor)
        assert cursor.getvalue() == data

    def test_lock_tile(self, item_database):
        data = create_tile(242, flags=TileFlags.HAS_EXTRA_DATA | TileFlags.IS_ON,
                           extra=create_lock_payload())
        codec = TileCodec(item_database)
        tile = codec.decode(Cursor(data))

        assert isinstance(tile.tile_type, Lock)
        assert tile.flags & TileFlags.IS_ON

        cursor = Cursor()
        codec.encode(tile, cursor)
        assert cursor.getvalue() == data

    def test_trailing_text(self):
        data = create_tile(14666, trailing_text='hello there')
        tile = TileCodec(None).decode(Cursor(data))

        assert tile.trailing_text == 'hello there'

        cursor = Cursor()
        TileCodec(None).encode(tile, cursor)
        assert cursor.getvalue() == data

    def test_unknown_item(self, item_database):
        data = create_tile(9999, flags=TileFlags.HAS_EXTRA_DATA, extra=b'\x01')

        with pytest.raises(UnknownItem) as exc_info:
            TileCodec(item_database).decode(Cursor(data))
        assert exc_info.value.item_id == 9999
        assert exc_info.value.offset == 8

    def test_unregistered_tag(self, item_database):
        data = create_tile(242, flags=TileFlags.HAS_EXTRA_DATA, extra=b'\x05')

        with pytest.raises(UnknownTileVariant) as exc_info:
            TileCodec(item_database).decode(Cursor(data))
        assert exc_info.value.tag == 5
        assert exc_info.value.item_id == 242

    def test_category_mismatch_warns(self, item_database, caplog):
        # Sign item carrying door data
        data = create_tile(20, flags=TileFlags.HAS_EXTRA_DATA,
                           extra=b'\x01' + pack_string('hi') + b'\x00')

        with caplog.at_level(logging.WARNING, logger='gtworld.tiles.codec'):
            tile = TileCodec(item_database).decode(Cursor(data))

        assert tile.tile_type == Door(text='hi', unknown_1=0)
        assert 'category 2' in caplog.text
