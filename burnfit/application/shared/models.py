"""Output models shared by application queries."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.physiology.entities.user_health_info import UserHealthInfo


class DishOutput(BaseModel):
    """Dish as exposed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    dish_id: str
    name: str
    calories: float = Field(..., gt=0, description="kcal for reference_grams")
    reference_grams: float = Field(..., gt=0)
    image_url: Optional[str] = None
    is_high_calorie: bool

    @classmethod
    def from_domain(cls, dish: Dish) -> DishOutput:
        return cls(
            dish_id=str(dish.dish_id),
            name=dish.name,
            calories=dish.calories,
            reference_grams=dish.nutrition.reference_grams,
            image_url=dish.image_url,
            is_high_calorie=dish.is_high_calorie(),
        )


class UserOutput(BaseModel):
    """User data that shaped a calculation."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    weight: float
    preferred_activity_keys: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, user: UserHealthInfo) -> UserOutput:
        return cls(
            user_id=str(user.user_id),
            weight=user.weight,
            preferred_activity_keys=list(user.preferred_activity_keys),
        )
