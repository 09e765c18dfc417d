"""Domain services for the effort domain."""

from .effort_calculator import EffortCalculator

__all__ = ["EffortCalculator"]
