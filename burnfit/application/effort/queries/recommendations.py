"""Quick and endurance recommendation queries.

Both modes return None when no activity qualifies: "not applicable for
this dish", not an error.
"""

from dataclasses import dataclass
from typing import Optional

from burnfit.application.effort.models import EffortResultOutput
from burnfit.application.shared.dish_resolution import resolve_dish
from burnfit.domain.effort.services.effort_calculator import EffortCalculator
from burnfit.domain.effort.value_objects.effort_request import EffortRequest
from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.ports.dish_repository import IDishRepository
from burnfit.domain.physiology.entities.user_health_info import UserHealthInfo


@dataclass(frozen=True)
class QuickRecommendationsQuery:
    """Query: vigorous activities burning the dish within 30 minutes."""

    user: UserHealthInfo
    dish_id: Optional[str] = None
    dish: Optional[Dish] = None


@dataclass(frozen=True)
class EnduranceRecommendationsQuery:
    """Query: moderate activities of at least 45 minutes."""

    user: UserHealthInfo
    dish_id: Optional[str] = None
    dish: Optional[Dish] = None


class QuickRecommendationsQueryHandler:
    def __init__(self, calculator: EffortCalculator, dish_repository: IDishRepository):
        self._calculator = calculator
        self._dish_repository = dish_repository

    async def handle(self, query: QuickRecommendationsQuery) -> Optional[EffortResultOutput]:
        dish = await resolve_dish(self._dish_repository, query.dish_id, query.dish)
        request = EffortRequest.of(dish, query.user)

        breakdown = self._calculator.get_quick_recommendations(request)
        if breakdown is None:
            return None
        return EffortResultOutput.from_domain(request, breakdown)


class EnduranceRecommendationsQueryHandler:
    def __init__(self, calculator: EffortCalculator, dish_repository: IDishRepository):
        self._calculator = calculator
        self._dish_repository = dish_repository

    async def handle(self, query: EnduranceRecommendationsQuery) -> Optional[EffortResultOutput]:
        dish = await resolve_dish(self._dish_repository, query.dish_id, query.dish)
        request = EffortRequest.of(dish, query.user)

        breakdown = self._calculator.get_endurance_recommendations(request)
        if breakdown is None:
            return None
        return EffortResultOutput.from_domain(request, breakdown)
