"""Command that assembles the vending machine and runs it."""

import argparse
import time
from typing import Callable, Optional, Sequence, TypeVar

from vendomat.can_vendor import get_vendor
from vendomat.console_input import get_item_selector
from vendomat.machine import VendingMachine
from vendomat.refrigerator import get_temperature_controller

T = TypeVar("T")

_CYCLE_DELAY = 0.1

_LOAD_FAILURE = (
    "Whoops! Failed trying to load one of the components or its function "
    "for instantiating the object. At this time all components must load "
    "successfully but should consider a method of gracefully running the "
    "application if some or all of these fail."
)


class ComponentLoadError(Exception):
    """A machine component could not be obtained from its factory."""


def load_component(factory: Callable[[], Optional[T]]) -> T:
    """Call ``factory`` and return the component it yields."""
    try:
        component = factory()
    except Exception as exc:
        raise ComponentLoadError(f"factory {factory!r} failed: {exc}") from exc
    if component is None:
        raise ComponentLoadError(f"factory {factory!r} returned no component")
    return component


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the vending machine until interrupted; return the exit status."""
    parser = argparse.ArgumentParser(prog="vendomat", description="Run the vending machine.")
    parser.parse_args(argv)

    try:
        temp_controller = load_component(get_temperature_controller)
        item_selector = load_component(get_item_selector)
        vendor = load_component(get_vendor)
    except ComponentLoadError:
        print(_LOAD_FAILURE)
        return -1

    machine = VendingMachine(temp_controller, item_selector, vendor)
    try:
        while True:
            machine.execute()
            time.sleep(_CYCLE_DELAY)
    except KeyboardInterrupt:
        return 0