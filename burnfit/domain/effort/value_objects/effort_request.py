"""EffortRequest value object - a dish to burn for a given user."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.physiology.entities.user_health_info import UserHealthInfo
from burnfit.domain.shared.errors import InvalidEffortRequestError
from burnfit.domain.shared.units import Kilocalories, Kilograms


@dataclass(frozen=True)
class EffortRequest:
    """Read-only view over a resolved dish and user profile.

    The dish calories are taken as-is: portion adjustment happens before
    the request is built.
    """

    dish: Dish
    user: UserHealthInfo

    def __post_init__(self) -> None:
        if self.dish is None:
            raise InvalidEffortRequestError("Effort request requires a dish")
        if self.user is None:
            raise InvalidEffortRequestError("Effort request requires a user")

    @classmethod
    def of(cls, dish: Dish, user: UserHealthInfo) -> "EffortRequest":
        return cls(dish=dish, user=user)

    @property
    def calories(self) -> Kilocalories:
        return self.dish.calories

    @property
    def user_weight(self) -> Kilograms:
        return self.user.weight

    @property
    def preferred_activity_keys(self) -> Tuple[str, ...]:
        """Activity keys in priority order."""
        return self.user.preferred_activity_keys

    @property
    def primary_activity_key(self) -> Optional[str]:
        return self.user.primary_activity_key

    @property
    def is_high_calorie_request(self) -> bool:
        return self.dish.is_high_calorie()

    @property
    def summary(self) -> str:
        return f"{self.dish.name} ({self.calories:g} kcal) for {self.user_weight:g} kg"

    def with_user(self, user: UserHealthInfo) -> "EffortRequest":
        return replace(self, user=user)

    def with_dish(self, dish: Dish) -> "EffortRequest":
        return replace(self, dish=dish)
