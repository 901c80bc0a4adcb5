"""A console vending machine assembled from pluggable components."""

__version__ = "0.1.0"

__all__ = ["__version__"]