"""CalculatePortionQuery - calories for a user-selected portion."""

from dataclasses import dataclass
from typing import Optional

import structlog

from burnfit.application.nutrition.models import (
    DisplayContextOutput,
    PortionCalculationResult,
    ServingSizeOutput,
)
from burnfit.application.shared.dish_resolution import resolve_dish
from burnfit.application.shared.models import DishOutput
from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.ports.dish_repository import IDishRepository
from burnfit.domain.nutrition.services.quantity_converter import (
    MAX_VALID_GRAMS,
    QuantityConverter,
)
from burnfit.domain.shared.errors import InvalidServingSizeError
from burnfit.domain.shared.units import Grams

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalculatePortionQuery:
    """
    Query: resolve a selected portion of a dish.

    Attributes:
        selected_grams: Portion in grams, in (0, 5000]
        serving_text: Reference serving of the dish (e.g. "1 slice")
        dish_id: Identifier of a dish in the repository
        dish: Resolved dish
    """

    selected_grams: float
    serving_text: str = "100g"
    dish_id: Optional[str] = None
    dish: Optional[Dish] = None


class CalculatePortionQueryHandler:
    """Handler for CalculatePortionQuery."""

    def __init__(self, converter: QuantityConverter, dish_repository: IDishRepository):
        self._converter = converter
        self._dish_repository = dish_repository

    async def handle(self, query: CalculatePortionQuery) -> PortionCalculationResult:
        """
        Execute query.

        The adjusted dish carries the selected portion's calories and can be
        passed straight to an effort calculation.

        Raises:
            InvalidServingSizeError: If selected_grams is outside (0, 5000]
                or serving_text is blank
            DishNotFoundError: If dish_id matches no dish
        """
        if query.selected_grams <= 0 or query.selected_grams > MAX_VALID_GRAMS:
            raise InvalidServingSizeError(
                f"Selected grams must be in (0, {MAX_VALID_GRAMS:g}]"
            )

        dish = await resolve_dish(self._dish_repository, query.dish_id, query.dish)
        serving = self._converter.parse_serving_string(query.serving_text)
        selected = Grams(float(query.selected_grams))

        actual_calories = dish.nutrition.calories_for_quantity(selected)
        context = self._converter.generate_display_context(serving, selected)
        adjusted = dish.with_calories(actual_calories, selected)

        logger.debug(
            "portion_calculated",
            dish_id=str(dish.dish_id),
            serving=self._converter.format_for_logging(serving),
            selected_grams=selected,
            calories=actual_calories,
        )

        return PortionCalculationResult(
            dish=DishOutput.from_domain(dish),
            original_serving=ServingSizeOutput.from_domain(serving, self._converter.locale),
            selected_grams=selected,
            actual_calories=actual_calories,
            display_context=DisplayContextOutput.from_domain(context),
            adjusted_dish=DishOutput.from_domain(adjusted),
        )
