"""Refrigeration unit driven through a pair of digital pins."""

from dataclasses import dataclass
from functools import lru_cache

from vendomat.interfaces import TemperatureController

START_MESSAGE = "Starting refrigeration."
STOP_MESSAGE = "Stopping refrigeration."


@dataclass
class Pin:
    """A digital line whose level is shared between its owner and a device."""

    value: bool = False

    def __bool__(self) -> bool:
        return self.value


class Refrigerator(TemperatureController):
    """Cooling unit: drives one pin and watches another for faults."""

    def __init__(self, drive_pin: Pin, error_pin: Pin) -> None:
        self.drive_pin = drive_pin
        self.error_pin = error_pin

    def start_regulating(self) -> None:
        print(START_MESSAGE)
        self.drive_pin.value = True

    def stop_regulating(self) -> None:
        print(STOP_MESSAGE)
        self.drive_pin.value = False

    def is_okay(self) -> bool:
        return not self.error_pin.value


@lru_cache(maxsize=None)
def get_temperature_controller() -> Refrigerator:
    """Return the machine's single refrigerator, wired to its own pins."""
    return Refrigerator(Pin(), Pin())