"""Dish entity."""

from dataclasses import dataclass, replace
from typing import Optional

from burnfit.domain.shared.errors import InvalidDishError
from burnfit.domain.shared.units import Kilocalories

from ..value_objects.dish_id import DishId
from ..value_objects.nutritional_info import NutritionalInfo

HIGH_CALORIE_THRESHOLD = 400.0


@dataclass(frozen=True)
class Dish:
    """A food item whose calories are to be burned.

    Calories are those of the reference quantity in ``nutrition``; callers
    resolving a different portion should pass ``with_calories()`` output
    to effort calculation.
    """

    dish_id: DishId
    name: str
    nutrition: NutritionalInfo
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidDishError("Dish name cannot be empty")

    @classmethod
    def create(
        cls,
        dish_id: DishId,
        name: str,
        nutrition: NutritionalInfo,
        image_url: Optional[str] = None,
    ) -> "Dish":
        return cls(
            dish_id=dish_id,
            name=(name or "").strip(),
            nutrition=nutrition,
            image_url=image_url,
        )

    @property
    def calories(self) -> Kilocalories:
        return self.nutrition.calories

    def is_high_calorie(self) -> bool:
        """More than 400 kcal."""
        return self.calories > HIGH_CALORIE_THRESHOLD

    def with_calories(self, calories: float, reference_grams: float = 100.0) -> "Dish":
        """Same dish with calories adjusted for a resolved portion."""
        return replace(self, nutrition=NutritionalInfo.per_serving(calories, reference_grams))

    def __str__(self) -> str:
        return f"{self.name} ({self.calories:g} kcal)"
