"""NutritionalInfo value object - energy content of a dish."""

from dataclasses import dataclass

from burnfit.domain.shared.errors import InvalidDishError
from burnfit.domain.shared.units import Kilocalories


@dataclass(frozen=True)
class NutritionalInfo:
    """Calories of a dish for a reference quantity.

    Attributes:
        calories: Energy in kcal for the reference quantity (must be positive)
        reference_grams: Quantity the calories refer to (default 100g)

    Example:
        >>> info = NutritionalInfo.per_serving(52)
        >>> info.calories_for_quantity(150)
        78.0
    """

    calories: Kilocalories
    reference_grams: float = 100.0

    def __post_init__(self) -> None:
        if self.calories <= 0:
            raise InvalidDishError(f"Calories must be positive, got {self.calories}")
        if self.reference_grams <= 0:
            raise InvalidDishError(
                f"Reference quantity must be positive, got {self.reference_grams}"
            )

    @classmethod
    def per_serving(cls, calories: float, reference_grams: float = 100.0) -> "NutritionalInfo":
        return cls(calories=Kilocalories(float(calories)), reference_grams=float(reference_grams))

    def calories_for_quantity(self, grams: float) -> Kilocalories:
        """Scale calories linearly to a gram amount."""
        return Kilocalories(self.calories * grams / self.reference_grams)
