"""CalculateEffortQuery - minutes of activity needed to burn a dish."""

from dataclasses import dataclass
from typing import Optional

import structlog

from burnfit.application.effort.models import EffortResultOutput
from burnfit.application.shared.dish_resolution import resolve_dish
from burnfit.domain.effort.services.effort_calculator import EffortCalculator
from burnfit.domain.effort.value_objects.effort_request import EffortRequest
from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.ports.dish_repository import IDishRepository
from burnfit.domain.physiology.entities.user_health_info import UserHealthInfo

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalculateEffortQuery:
    """
    Query: effort breakdown for a dish.

    Either ``dish`` (already portion-adjusted) or ``dish_id`` must be set;
    ``dish`` wins when both are.

    Attributes:
        user: User health profile
        dish_id: Identifier of a dish in the repository
        dish: Resolved dish
    """

    user: UserHealthInfo
    dish_id: Optional[str] = None
    dish: Optional[Dish] = None


class CalculateEffortQueryHandler:
    """Handler for CalculateEffortQuery."""

    def __init__(self, calculator: EffortCalculator, dish_repository: IDishRepository):
        """
        Initialize handler.

        Args:
            calculator: Effort calculation domain service
            dish_repository: Dish repository port
        """
        self._calculator = calculator
        self._dish_repository = dish_repository

    async def handle(self, query: CalculateEffortQuery) -> EffortResultOutput:
        """
        Execute query.

        Args:
            query: CalculateEffortQuery

        Returns:
            EffortResultOutput with primary effort, alternatives and summary

        Raises:
            DishNotFoundError: If dish_id matches no dish
            NoSuitableActivityError: If no activity can be resolved

        Example:
            >>> handler = CalculateEffortQueryHandler(calculator, repository)
            >>> result = await handler.handle(
            ...     CalculateEffortQuery(user=UserHealthInfo.average(), dish_id="apple")
            ... )
            >>> result.effort.primary.minutes
            22
        """
        dish = await resolve_dish(self._dish_repository, query.dish_id, query.dish)
        request = EffortRequest.of(dish, query.user)

        breakdown = self._calculator.calculate_effort(request)

        logger.info(
            "effort_query_handled",
            dish_id=str(dish.dish_id),
            primary=breakdown.primary.activity_key,
            minutes=breakdown.primary.minutes,
        )
        return EffortResultOutput.from_domain(request, breakdown)
