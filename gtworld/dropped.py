"""
Dropped items block codec
"""

from .cursor import Cursor
from .models import Dropped, DroppedItem


def decode_dropped(cursor: Cursor) -> Dropped:
    """
    Decode the dropped items block

    Layout: items_count u32, last_dropped_item_uid u32, then items_count
    fixed-size DroppedItem records.
    """
    items_count = cursor.read_u32()
    last_uid = cursor.read_u32()
    items = [DroppedItem.read(cursor) for _ in range(items_count)]
    return Dropped(last_dropped_item_uid=last_uid, items=items)


def encode_dropped(dropped: Dropped, cursor: Cursor) -> None:
    cursor.write_u32(len(dropped.items))
    cursor.write_u32(dropped.last_dropped_item_uid)
    for item in dropped.items:
        item.write(cursor)
