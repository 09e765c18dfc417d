"""Comparison queries: across intensity bands and across effort policies."""

from dataclasses import dataclass
from typing import Optional

from burnfit.application.effort.models import IntensityComparisonOutput, PolicyComparisonOutput
from burnfit.application.shared.dish_resolution import resolve_dish
from burnfit.domain.effort.policies.effort_policy import (
    DEFAULT_SAFETY_MARGIN_PERCENT,
    ConservativeEffortPolicy,
)
from burnfit.domain.effort.services.effort_calculator import EffortCalculator
from burnfit.domain.effort.value_objects.effort_request import EffortRequest
from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.ports.dish_repository import IDishRepository
from burnfit.domain.physiology.entities.user_health_info import UserHealthInfo


@dataclass(frozen=True)
class CompareIntensityQuery:
    """
    Query: minutes with the first light, moderate and vigorous activity.

    Attributes:
        user: User health profile
        dish_id: Identifier of a dish in the repository
        dish: Resolved dish
    """

    user: UserHealthInfo
    dish_id: Optional[str] = None
    dish: Optional[Dish] = None


@dataclass(frozen=True)
class ComparePoliciesQuery:
    """
    Query: primary effort under the configured policy vs a conservative one.

    Attributes:
        user: User health profile
        dish_id: Identifier of a dish in the repository
        dish: Resolved dish
        safety_margin_percent: Margin of the conservative policy
    """

    user: UserHealthInfo
    dish_id: Optional[str] = None
    dish: Optional[Dish] = None
    safety_margin_percent: float = DEFAULT_SAFETY_MARGIN_PERCENT


class CompareIntensityQueryHandler:
    """Handler for CompareIntensityQuery."""

    def __init__(self, calculator: EffortCalculator, dish_repository: IDishRepository):
        self._calculator = calculator
        self._dish_repository = dish_repository

    async def handle(self, query: CompareIntensityQuery) -> IntensityComparisonOutput:
        dish = await resolve_dish(self._dish_repository, query.dish_id, query.dish)
        request = EffortRequest.of(dish, query.user)
        comparison = self._calculator.get_comparative_breakdown(request)
        return IntensityComparisonOutput.from_domain(request, comparison)


class ComparePoliciesQueryHandler:
    """Handler for ComparePoliciesQuery."""

    def __init__(self, calculator: EffortCalculator, dish_repository: IDishRepository):
        self._calculator = calculator
        self._dish_repository = dish_repository

    async def handle(self, query: ComparePoliciesQuery) -> PolicyComparisonOutput:
        """
        Execute query.

        Raises:
            InvalidEffortInputError: If safety_margin_percent is negative
            DishNotFoundError: If dish_id matches no dish
        """
        dish = await resolve_dish(self._dish_repository, query.dish_id, query.dish)
        request = EffortRequest.of(dish, query.user)

        alternative_policy = ConservativeEffortPolicy(query.safety_margin_percent)
        comparison = self._calculator.compare_policies(request, alternative_policy)

        return PolicyComparisonOutput.from_domain(
            request,
            comparison,
            baseline_policy=self._calculator.effort_policy.name,
            alternative_policy=alternative_policy.name,
        )
