"""Entities for the nutrition domain."""

from .dish import HIGH_CALORIE_THRESHOLD, Dish

__all__ = ["Dish", "HIGH_CALORIE_THRESHOLD"]
