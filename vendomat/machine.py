"""The vending machine's control cycle."""

import os
import subprocess
import sys
import time
from typing import Callable, Optional, TextIO

from vendomat.interfaces import ItemSelector, TemperatureController, Vendor

ITEMS = {
    "coke": 1,
    "diet coke": 2,
    "dr. pepper": 3,
    "sprite": 4,
    "irish coffee": 5,
}

_COUNTDOWN_STEPS = 5


def clear_terminal() -> None:
    """Clear the console with the platform's own command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


class VendingMachine:
    """Ties a temperature controller, an item selector and a vendor together.

    Building the machine starts temperature regulation.
    """

    def __init__(
        self,
        temp_controller: TemperatureController,
        item_selector: ItemSelector,
        vendor: Vendor,
        output: Optional[TextIO] = None,
        pause: Optional[Callable[[float], None]] = None,
        clear_screen: Optional[Callable[[], None]] = None,
    ) -> None:
        self.temp_controller = temp_controller
        self.item_selector = item_selector
        self.vendor = vendor
        self._output = output
        self._pause = time.sleep if pause is None else pause
        self._clear_screen = clear_terminal if clear_screen is None else clear_screen
        self._status_checks = [temp_controller.is_okay]
        temp_controller.start_regulating()

    def execute(self) -> int:
        """Run one customer cycle; return 0 if the hardware is healthy, else -1."""
        healthy = all(check() for check in self._status_checks)
        out = sys.stdout if self._output is None else self._output

        print("Available items:", file=out)
        for name in sorted(ITEMS):
            print(name, file=out)
        print(file=out)
        out.flush()

        selection = self.item_selector.get_selection()
        location = ITEMS.get(selection)
        if location is None:
            print(f"Invalid item entered: {selection}", file=out)
        else:
            self.vendor.vend(location)

        for _ in range(_COUNTDOWN_STEPS):
            out.write(".")
            out.flush()
            self._pause(1)
        self._clear_screen()

        return 0 if healthy else -1