"""Factory for creating Fret Spectrum components."""

from typing import Optional, Dict, Type

from ..catalog import IntervalCatalog
from ..geometry import FretboardLayout
from ..logger import get_logger
from ..mock_player import NullPlayer
from ..playback import SoundDevicePlayer
from ..session import FretboardSession
from ..tuning import Tuning
from .config import ConfigManager
from .interfaces import INotePlayer

logger = get_logger(__name__)


class ComponentFactory:
    """Factory for creating Fret Spectrum components."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """Initialize the component factory.

        Args:
            config_manager: Configuration manager, or None to create a default one
        """
        self.config_manager = config_manager or ConfigManager()

        # Register default component implementations
        self.player_classes: Dict[str, Type[INotePlayer]] = {
            "default": SoundDevicePlayer,
            "null": NullPlayer,
        }

    def create_layout(self, **kwargs) -> FretboardLayout:
        """Create the pixel layout from the display configuration.

        Args:
            **kwargs: Overrides for individual layout fields
        """
        config = self.config_manager.get_config("display")
        config.update(kwargs)
        return FretboardLayout(**config)

    def create_catalog(
        self, variant: Optional[str] = None, catalog_file: Optional[str] = None
    ) -> IntervalCatalog:
        """Create the chord/scale catalog.

        A catalog file, when configured, replaces the built-in table.

        Raises:
            ValueError: If the variant is unknown or the file is malformed
        """
        config = self.config_manager.get_config("catalog")
        catalog_file = catalog_file or config.get("catalog_file")
        if catalog_file:
            return IntervalCatalog.from_json(catalog_file)
        return IntervalCatalog.builtin(variant or config.get("variant", "standard"))

    def create_tuning(self) -> Tuning:
        config = self.config_manager.get_config("tuning")
        return Tuning.standard(config.get("string_octaves"))

    def create_player(self, implementation: str = "default", **kwargs) -> INotePlayer:
        """Create a note player.

        Args:
            implementation: Name of the implementation to use
            **kwargs: Additional parameters to pass to the constructor

        Returns:
            Note player instance

        Raises:
            ValueError: If the implementation is not registered
        """
        if implementation not in self.player_classes:
            raise ValueError(f"Unknown player implementation: {implementation}")

        cls = self.player_classes[implementation]
        if cls is SoundDevicePlayer:
            config = self.config_manager.get_config("playback")
            config.update(kwargs)
            instance = cls(**config)
        else:
            instance = cls(**kwargs)

        logger.info(f"Created note player: {implementation}")
        return instance

    def create_session(
        self,
        player: Optional[INotePlayer] = None,
        catalog_variant: Optional[str] = None,
    ) -> FretboardSession:
        """Create a session wired from the current configuration."""
        playback = self.config_manager.get_config("playback")
        session = FretboardSession(
            player=player or self.create_player(),
            catalog=self.create_catalog(variant=catalog_variant),
            tuning=self.create_tuning(),
            layout=self.create_layout(),
            note_duration=playback.get("duration", 0.6),
        )
        logger.info("Created fretboard session")
        return session
