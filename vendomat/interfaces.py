"""Abstract roles that a vending machine is assembled from."""

from abc import ABC, abstractmethod


class TemperatureController(ABC):
    """Keeps the stock at its storage temperature."""

    @abstractmethod
    def start_regulating(self) -> None:
        """Begin driving the cooling hardware."""

    @abstractmethod
    def stop_regulating(self) -> None:
        """Stop driving the cooling hardware."""

    @abstractmethod
    def is_okay(self) -> bool:
        """Return True while the hardware reports no fault."""


class ItemSelector(ABC):
    """Source of the customer's choice of item."""

    @abstractmethod
    def get_selection(self) -> str:
        """Return the name of the item the customer asked for."""


class Vendor(ABC):
    """Mechanism that drops an item from a storage location."""

    @abstractmethod
    def vend(self, location: int) -> None:
        """Release the item held at ``location``."""