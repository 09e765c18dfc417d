"""Portion output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from burnfit.application.shared.models import DishOutput
from burnfit.domain.nutrition.services.quantity_converter import DisplayContext
from burnfit.domain.nutrition.value_objects.serving_size import ServingSize


class ServingSizeOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., gt=0)
    unit: str
    grams: float = Field(..., gt=0)
    display: str
    is_per_product: bool

    @classmethod
    def from_domain(cls, serving: ServingSize, locale: str = "fr") -> ServingSizeOutput:
        return cls(
            amount=serving.amount,
            unit=serving.unit.value,
            grams=serving.to_grams(),
            display=serving.to_display_string(locale),
            is_per_product=serving.is_per_product,
        )


class DisplayContextOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity_text: str
    is_per_product: bool
    serving_description: str

    @classmethod
    def from_domain(cls, context: DisplayContext) -> DisplayContextOutput:
        return cls(
            quantity_text=context.quantity_text,
            is_per_product=context.is_per_product,
            serving_description=context.serving_description,
        )


class PortionCalculationResult(BaseModel):
    """
    Calories of a selected portion of a dish.

    Attributes:
        dish: Dish as stored (reference serving)
        original_serving: Reference serving of the dish
        selected_grams: Portion chosen by the user
        actual_calories: Calories of the selected portion
        display_context: How to render the selected portion
        adjusted_dish: Dish whose calories match the selected portion
    """

    model_config = ConfigDict(frozen=True)

    dish: DishOutput
    original_serving: ServingSizeOutput
    selected_grams: float = Field(..., gt=0, le=5000)
    actual_calories: float
    display_context: DisplayContextOutput
    adjusted_dish: DishOutput
