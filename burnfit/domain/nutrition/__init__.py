"""Nutrition domain: dishes and portion normalization."""

from .entities import HIGH_CALORIE_THRESHOLD, Dish
from .ports import IDishRepository
from .services import DisplayContext, QuantityConverter
from .value_objects import (
    GRAMS_PER_UNIT,
    DishId,
    NutritionalInfo,
    PortionUnit,
    ServingSize,
    format_amount,
)

__all__ = [
    "Dish",
    "DishId",
    "DisplayContext",
    "GRAMS_PER_UNIT",
    "HIGH_CALORIE_THRESHOLD",
    "IDishRepository",
    "NutritionalInfo",
    "PortionUnit",
    "QuantityConverter",
    "ServingSize",
    "format_amount",
]
