"""
Extra tile data registry
Maps the extra tile data type byte to its payload class
"""

from typing import Dict, Iterable, Optional, Type

from .base_decoder import TileData
from . import common_tiles, extended_tiles


class TileTypeRegistry:
    """
    Registry for extra tile data payload classes

    Every registered class must define a unique integer TAG.
    """

    def __init__(self, register_builtins: bool = True):
        self._payloads: Dict[int, Type[TileData]] = {}

        if register_builtins:
            self.register_common_types()
            self.register_extended_types()

    def register(self, payload_class: Type[TileData]) -> Type[TileData]:
        """
        Register a payload class under its TAG

        Returns the class so the method can be used as a decorator.

        Raises:
            ValueError: If the class has no TAG or the TAG is taken
        """
        tag = payload_class.TAG
        if tag is None:
            raise ValueError(f"{payload_class.__name__} has no TAG")
        existing = self._payloads.get(tag)
        if existing is not None and existing is not payload_class:
            raise ValueError(
                f"Tag {tag} already registered to {existing.__name__}"
            )
        self._payloads[tag] = payload_class
        return payload_class

    def register_all(self, payload_classes: Iterable[Type[TileData]]) -> None:
        for payload_class in payload_classes:
            self.register(payload_class)

    def register_common_types(self):
        """Register door, lock, farming and display shapes"""
        self.register_all([
            common_tiles.Door,
            common_tiles.Sign,
            common_tiles.Lock,
            common_tiles.Seed,
            common_tiles.Mailbox,
            common_tiles.Bulletin,
            common_tiles.Dice,
            common_tiles.ChemicalSource,
            common_tiles.AchievementBlock,
            common_tiles.HeartMonitor,
            common_tiles.DonationBox,
            common_tiles.Mannequin,
            common_tiles.BunnyEgg,
            common_tiles.GamePack,
            common_tiles.GameGenerator,
            common_tiles.XenoniteCrystal,
            common_tiles.PhoneBooth,
            common_tiles.Crystal,
            common_tiles.CrimeInProgress,
            common_tiles.DisplayBlock,
            common_tiles.VendingMachine,
            common_tiles.GivingTree,
            common_tiles.CountryFlag,
            common_tiles.WeatherMachine,
            common_tiles.DataBedrock,
        ])

    def register_extended_types(self):
        """Register machine, pet, storage and event shapes"""
        self.register_all([
            extended_tiles.FishTankPort,
            extended_tiles.SolarCollector,
            extended_tiles.Forge,
            extended_tiles.SteamOrgan,
            extended_tiles.SilkWorm,
            extended_tiles.SewingMachine,
            extended_tiles.LobsterTrap,
            extended_tiles.PaintingEasel,
            extended_tiles.PetBattleCage,
            extended_tiles.PetTrainer,
            extended_tiles.SteamEngine,
            extended_tiles.LockBot,
            extended_tiles.SpiritStorageUnit,
            extended_tiles.Shelf,
            extended_tiles.VipEntrance,
            extended_tiles.ChallengeTimer,
            extended_tiles.FishWallMount,
            extended_tiles.Portrait,
            extended_tiles.GuildWeatherMachine,
            extended_tiles.FossilPrepStation,
            extended_tiles.DnaExtractor,
            extended_tiles.Howler,
            extended_tiles.ChemsynthTank,
            extended_tiles.StorageBlock,
            extended_tiles.CookingOven,
            extended_tiles.AudioRack,
            extended_tiles.GeigerCharger,
            extended_tiles.AdventureBegins,
            extended_tiles.TombRobber,
            extended_tiles.BalloonOMatic,
            extended_tiles.TrainingPort,
            extended_tiles.ItemSucker,
            extended_tiles.CyBot,
            extended_tiles.GuildItem,
            extended_tiles.Growscan,
            extended_tiles.ContainmentFieldPowerNode,
            extended_tiles.SpiritBoard,
            extended_tiles.StormyCloud,
            extended_tiles.TemporaryPlatform,
            extended_tiles.SafeVault,
            extended_tiles.AngelicCountingCloud,
            extended_tiles.InfinityWeatherMachine,
            extended_tiles.PineappleGuzzler,
            extended_tiles.KrakenGalacticBlock,
            extended_tiles.FriendsEntrance,
        ])

    def get(self, tag: int) -> Optional[Type[TileData]]:
        """Get the payload class for an extra tile data type, or None"""
        return self._payloads.get(tag)

    def supports(self, tag: int) -> bool:
        return tag in self._payloads

    def list_supported(self) -> Dict[int, str]:
        """
        List all registered shapes

        Returns:
            Dictionary mapping tags to payload class names, ordered by tag
        """
        return {tag: self._payloads[tag].__name__ for tag in sorted(self._payloads)}

    def __len__(self) -> int:
        return len(self._payloads)


# Global registry instance
tile_registry = TileTypeRegistry()
