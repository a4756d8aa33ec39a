"""
Builders for raw world and tile buffers used across the test modules
"""

import struct
from typing import Iterable, Optional, Sequence

PREAMBLE = b'\x14\x00\x00\x00\x40\x00'
HEADER_RESERVED = b'\x00\x00\x00\x00\x00'
DROPPED_RESERVED = b'\x00' * 12


def pack_string(text: str, prefix: str = '<H', encoding: str = 'utf-8') -> bytes:
    """Length-prefixed string"""
    raw = text.encode(encoding)
    return struct.pack(prefix, len(raw)) + raw


def create_tile(fg: int,
                bg: int = 0,
                parent: int = 0,
                flags: int = 0,
                parent_data: Optional[int] = None,
                extra: bytes = b'',
                trailing_text: Optional[str] = None) -> bytes:
    """Create a tile record; extra is the tag byte plus payload"""
    data = struct.pack('<HHHH', fg, bg, parent, flags)
    if parent_data is not None:
        data += struct.pack('<H', parent_data)
    data += extra
    if trailing_text is not None:
        data += pack_string(trailing_text, '<I')
    return data


def create_lock_payload(settings: int = 1,
                        owner_uid: int = 42,
                        access_uids: Sequence[int] = (),
                        minimum_level: int = 0,
                        unknown: bytes = b'\x00' * 7) -> bytes:
    """Create a lock payload including its tag byte"""
    data = struct.pack('<BBII', 3, settings, owner_uid, len(access_uids))
    data += b''.join(struct.pack('<I', uid) for uid in access_uids)
    data += struct.pack('<B', minimum_level) + unknown
    return data


def create_dropped_item(item_id: int, x: float, y: float,
                        count: int = 1, flags: int = 0, uid: int = 1) -> bytes:
    return struct.pack('<HffBBI', item_id, x, y, count, flags, uid)


def create_world(tiles: Iterable[bytes],
                 name: str = 'TEST',
                 width: int = 1,
                 height: int = 1,
                 tile_count: Optional[int] = None,
                 dropped_items: Iterable[bytes] = (),
                 last_dropped_uid: int = 0,
                 weather: Sequence[int] = (0, 0, 0),
                 preamble: bytes = PREAMBLE,
                 header_reserved: bytes = HEADER_RESERVED,
                 dropped_reserved: bytes = DROPPED_RESERVED) -> bytes:
    """Create a complete world buffer"""
    tiles = list(tiles)
    dropped_items = list(dropped_items)
    if tile_count is None:
        tile_count = len(tiles)

    data = preamble + pack_string(name)
    data += struct.pack('<III', width, height, tile_count)
    data += header_reserved
    data += b''.join(tiles)
    data += dropped_reserved
    data += struct.pack('<II', len(dropped_items), last_dropped_uid)
    data += b''.join(dropped_items)
    data += struct.pack('<HHH', *weather)
    return data
