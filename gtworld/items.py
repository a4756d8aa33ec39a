"""
Item database interface consumed by the tile decoder.

Loading items.dat is handled elsewhere; this module only defines the
metadata the codec needs and a read-only in-memory store for it.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Mapping, Optional

# Item action type -> extra tile data type. Action types missing from the
# table have no extra tile data category (0).
ACTION_TYPE_TO_TILE_TYPE: Dict[int, int] = {
    2: 1,     # door
    3: 3,     # lock
    10: 2,    # sign
    13: 1,    # door
    19: 4,    # seed
    26: 1,    # door
    33: 6,    # mailbox
    34: 7,    # bulletin
    36: 8,    # dice
    38: 9,    # chemical source
    40: 10,   # achievement block
    43: 1,    # door
    46: 11,   # heart monitor
    47: 12,   # donation box
    48: 13,
    49: 14,   # mannequin
    51: 15,   # bunny egg
    52: 16,   # game pack
    53: 17,   # game generator
    54: 18,   # xenonite crystal
    55: 19,   # phone booth
    56: 20,   # crystal
    57: 21,   # crime in progress
    59: 22,
    61: 23,   # display block
    62: 24,   # vending machine
    63: 25,   # fish tank port
    65: 26,   # solar collector
    66: 27,   # forge
    67: 28,   # giving tree
    68: 29,
    71: 30,   # steam organ
    72: 31,   # silkworm
    73: 32,   # sewing machine
    74: 33,   # country flag
    75: 34,   # lobster trap
    76: 35,   # painting easel
    77: 36,   # pet battle cage
    78: 37,   # pet trainer
    79: 38,   # steam engine
    80: 39,   # lock bot
    81: 40,   # weather machine
    82: 41,   # spirit storage unit
    83: 43,   # shelf
    84: 44,   # vip entrance
    85: 45,   # challenge timer
    86: 33,   # country flag
    87: 47,   # fish wall mount
    88: 48,   # portrait
    89: 49,   # guild weather machine
    92: 51,   # dna extractor
}


def tile_type_for_action(action_type: int) -> int:
    """Map an item action type to its extra tile data type (0 if none)"""
    return ACTION_TYPE_TO_TILE_TYPE.get(action_type, 0)


@dataclass(frozen=True)
class ItemMeta:
    """
    Item metadata used by the world codec

    Args:
        item_id: Numeric item id
        name: Display name
        action_type: Game action type of the item
        grow_time: Seconds until a seed or chemical source is ready
        base_color: Packed colour used by world previews
        extra_data_type: Extra tile data category. When None it is derived
            from action_type.
    """
    item_id: int
    name: str = ''
    action_type: int = 0
    grow_time: int = 0
    base_color: int = 0
    extra_data_type: Optional[int] = None

    @property
    def tile_data_type(self) -> int:
        """Extra tile data category of this item (0 when unclassified)"""
        if self.extra_data_type is not None:
            return self.extra_data_type
        return tile_type_for_action(self.action_type)


class ItemDatabase:
    """
    Read-only item store shared by any number of world decodes

    The codec only ever calls lookup(); nothing in the package mutates it.
    """

    def __init__(self, items: Optional[Mapping[int, ItemMeta]] = None):
        self._items: Dict[int, ItemMeta] = dict(items or {})

    @classmethod
    def from_items(cls, items: Iterable[ItemMeta]) -> 'ItemDatabase':
        """Build a database from ItemMeta records keyed by their item_id"""
        return cls({item.item_id: item for item in items})

    def lookup(self, item_id: int) -> Optional[ItemMeta]:
        """Return metadata for item_id, or None if it is unknown"""
        return self._items.get(item_id)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: int) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[ItemMeta]:
        return iter(self._items.values())
