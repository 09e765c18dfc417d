"""Domain services for the nutrition domain."""

from .quantity_converter import DisplayContext, QuantityConverter

__all__ = ["DisplayContext", "QuantityConverter"]
