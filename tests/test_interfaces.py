import io

import pytest

from vendomat.can_vendor import CanVendor
from vendomat.console_input import ConsoleInput
from vendomat.interfaces import ItemSelector, TemperatureController, Vendor
from vendomat.refrigerator import Pin, Refrigerator


@pytest.mark.parametrize("interface", [TemperatureController, ItemSelector, Vendor])
def test_interfaces_cannot_be_instantiated(interface):
    with pytest.raises(TypeError):
        interface()


def test_refrigerator_reports_status_through_controller_interface():
    drive, error = Pin(), Pin()
    controller: TemperatureController = Refrigerator(drive, error)
    controller.start_regulating()
    error.value = False
    assert controller.is_okay() is True
    error.value = True
    assert controller.is_okay() is False


def test_can_vendor_used_through_vendor_interface():
    vendor: Vendor = CanVendor([False] * 5)
    vendor.vend(3)
    vendor.vend(4)
    assert isinstance(vendor, Vendor)
    assert vendor.drive_outputs == [False, False, False, True, True]


def test_console_input_used_through_selector_interface():
    selector: ItemSelector = ConsoleInput(io.StringIO("sprite\n"), io.StringIO())
    assert isinstance(selector, ItemSelector)
    assert selector.get_selection() == "sprite"


def test_refrigerator_used_through_controller_interface():
    drive, error = Pin(), Pin()
    controller: TemperatureController = Refrigerator(drive, error)
    controller.start_regulating()
    assert isinstance(controller, TemperatureController)
    assert drive.value is True
    controller.stop_regulating()
    assert drive.value is False