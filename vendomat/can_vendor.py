"""Can dispenser with one drive output per storage location."""

from functools import lru_cache
from typing import List

from vendomat.interfaces import Vendor

NUM_OUTPUTS = 10


class CanVendor(Vendor):
    """Raises the drive output of a location to release its can.

    Locations outside the range of outputs are announced but ignored.
    """

    def __init__(self, drive_outputs: List[bool]) -> None:
        self.drive_outputs = drive_outputs

    def vend(self, location: int) -> None:
        print(f"Vending item at location {location}")
        if 0 <= location < len(self.drive_outputs):
            self.drive_outputs[location] = True


@lru_cache(maxsize=None)
def get_vendor() -> CanVendor:
    """Return the machine's single can vendor with all outputs low."""
    return CanVendor([False] * NUM_OUTPUTS)