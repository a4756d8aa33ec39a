"""
Shared fixtures
"""

import pytest

from gtworld import ItemDatabase, ItemMeta


@pytest.fixture
def item_database():
    """Small item database covering the shapes used in the tests"""
    return ItemDatabase.from_items([
        ItemMeta(2, 'Dirt', action_type=17),
        ItemMeta(3, 'Dirt Seed', action_type=19, grow_time=31, base_color=0x3C5A7800),
        ItemMeta(6, 'Main Door', action_type=13),
        ItemMeta(14, 'Cave Background', action_type=18),
        ItemMeta(15, 'Cave Background Seed', action_type=19, grow_time=300,
                 base_color=0x10203000),
        ItemMeta(20, 'Sign', action_type=10),
        ItemMeta(242, 'World Lock', action_type=3),
        ItemMeta(5814, 'Guild Lock', action_type=3),
        ItemMeta(8878, 'Storage Box', extra_data_type=54),
        ItemMeta(14666, 'Text Block'),
    ])
