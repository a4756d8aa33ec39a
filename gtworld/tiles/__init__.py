"""
Extra tile data shapes and registry

The tile codec lives in gtworld.tiles.codec and is not imported here because
it depends on gtworld.models, which imports the shapes below.
"""

from .base_decoder import Basic, TileData, wire
from .common_tiles import (
    AchievementBlock, Bulletin, BunnyEgg, ChemicalSource, CountryFlag,
    CrimeInProgress, Crystal, DataBedrock, Dice, DisplayBlock, DonationBox,
    Door, GameGenerator, GamePack, GivingTree, HeartMonitor, Lock, Mailbox,
    Mannequin, PhoneBooth, Seed, Sign, VendingMachine, WeatherMachine,
    XenoniteCrystal
)
from .extended_tiles import (
    AdventureBegins, AngelicCountingCloud, AudioRack, BalloonOMatic,
    ChallengeTimer, ChemsynthTank, ContainmentFieldPowerNode, CookingOven,
    CookingOvenIngredient, CyBot, CyBotCommand, DnaExtractor, FishInfo,
    FishTankPort, FishWallMount, FossilPrepStation, Forge, FriendsEntrance,
    GeigerCharger, Growscan, GuildItem, GuildWeatherMachine, Howler,
    InfinityWeatherMachine, ItemSucker, KrakenGalacticBlock, LobsterTrap,
    LockBot, PaintingEasel, PetBattleCage, PetTrainer, PineappleGuzzler,
    Portrait, SafeVault, SewingMachine, Shelf, SilkWorm, SilkWormColor,
    SolarCollector, SpiritBoard, SpiritStorageUnit, SteamEngine, SteamOrgan,
    StorageBlock, StorageBlockItem, StormyCloud, TemporaryPlatform,
    TombRobber, TrainingPort, VipEntrance
)
from .registry import TileTypeRegistry, tile_registry

__all__ = [
    # Base
    'Basic', 'TileData', 'wire',

    # Registry
    'TileTypeRegistry', 'tile_registry',

    # Common shapes
    'Door', 'Sign', 'Lock', 'Seed', 'Mailbox', 'Bulletin', 'Dice',
    'ChemicalSource', 'AchievementBlock', 'HeartMonitor', 'DonationBox',
    'Mannequin', 'BunnyEgg', 'GamePack', 'GameGenerator', 'XenoniteCrystal',
    'PhoneBooth', 'Crystal', 'CrimeInProgress', 'DisplayBlock',
    'VendingMachine', 'GivingTree', 'CountryFlag', 'WeatherMachine',
    'DataBedrock',

    # Extended shapes
    'FishTankPort', 'SolarCollector', 'Forge', 'SteamOrgan', 'SilkWorm',
    'SewingMachine', 'LobsterTrap', 'PaintingEasel', 'PetBattleCage',
    'PetTrainer', 'SteamEngine', 'LockBot', 'SpiritStorageUnit', 'Shelf',
    'VipEntrance', 'ChallengeTimer', 'FishWallMount', 'Portrait',
    'GuildWeatherMachine', 'FossilPrepStation', 'DnaExtractor', 'Howler',
    'ChemsynthTank', 'StorageBlock', 'CookingOven', 'AudioRack',
    'GeigerCharger', 'AdventureBegins', 'TombRobber', 'BalloonOMatic',
    'TrainingPort', 'ItemSucker', 'CyBot', 'GuildItem', 'Growscan',
    'ContainmentFieldPowerNode', 'SpiritBoard', 'StormyCloud',
    'TemporaryPlatform', 'SafeVault', 'AngelicCountingCloud',
    'InfinityWeatherMachine', 'PineappleGuzzler', 'KrakenGalacticBlock',
    'FriendsEntrance',

    # Sub-records
    'FishInfo', 'SilkWormColor', 'StorageBlockItem', 'CookingOvenIngredient',
    'CyBotCommand',
]
