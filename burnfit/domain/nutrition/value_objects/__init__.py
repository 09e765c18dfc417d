"""Value objects for the nutrition domain."""

from .dish_id import DishId
from .nutritional_info import NutritionalInfo
from .portion_unit import GRAMS_PER_UNIT, PortionUnit
from .serving_size import ServingSize, format_amount

__all__ = [
    "DishId",
    "NutritionalInfo",
    "PortionUnit",
    "GRAMS_PER_UNIT",
    "ServingSize",
    "format_amount",
]
