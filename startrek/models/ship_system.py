"""Ship system catalog."""

from enum import IntEnum


class ShipSystem(IntEnum):
    """The eight ship systems that can be damaged.

    Values are the legacy D(8) array ordinals; iteration order (1-8) is the
    order used by every damage report.
    """

    WARP_ENGINES = 1
    SHORT_RANGE_SENSORS = 2
    LONG_RANGE_SENSORS = 3
    PHASER_CONTROL = 4
    PHOTON_TUBES = 5
    DAMAGE_CONTROL = 6
    SHIELD_CONTROL = 7
    LIBRARY_COMPUTER = 8

    @property
    def display_name(self) -> str:
        """Name shown in damage reports."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ShipSystem.WARP_ENGINES: "WARP ENGINES",
    ShipSystem.SHORT_RANGE_SENSORS: "SHORT RANGE SENSORS",
    ShipSystem.LONG_RANGE_SENSORS: "LONG RANGE SENSORS",
    ShipSystem.PHASER_CONTROL: "PHASER CONTROL",
    ShipSystem.PHOTON_TUBES: "PHOTON TUBES",
    ShipSystem.DAMAGE_CONTROL: "DAMAGE CONTROL",
    ShipSystem.SHIELD_CONTROL: "SHIELD CONTROL",
    ShipSystem.LIBRARY_COMPUTER: "LIBRARY-COMPUTER",
}
