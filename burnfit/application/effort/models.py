"""
Effort output models.

Immutable DTOs mapping effort domain results for the presentation layer.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from burnfit.application.shared.models import DishOutput, UserOutput
from burnfit.domain.effort.entities.effort_breakdown import (
    BreakdownSummary,
    ComparativeBreakdown,
    EffortBreakdown,
    PolicyComparison,
)
from burnfit.domain.effort.value_objects.effort_item import EffortItem
from burnfit.domain.effort.value_objects.effort_request import EffortRequest


class EffortItemOutput(BaseModel):
    """
    Minutes of one activity.

    Example:
        >>> EffortItemOutput.from_domain(EffortItem.of("jogging_general", "Jogging", 63, 7.0))
        EffortItemOutput(activity_key='jogging_general', ..., formatted_duration='1h 3min', ...)
    """

    model_config = ConfigDict(frozen=True)

    activity_key: str
    activity_label: str
    minutes: int = Field(..., ge=1)
    met_value: float = Field(..., gt=0)
    formatted_duration: str
    effort_description: str

    @classmethod
    def from_domain(cls, item: EffortItem) -> EffortItemOutput:
        return cls(
            activity_key=item.activity_key,
            activity_label=item.activity_label,
            minutes=item.minutes,
            met_value=item.met_value,
            formatted_duration=item.formatted_duration,
            effort_description=item.effort_description.value,
        )


class BreakdownSummaryOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_options: int
    quickest_time: int
    longest_time: int
    average_time: int
    primary_activity_label: str

    @classmethod
    def from_domain(cls, summary: BreakdownSummary) -> BreakdownSummaryOutput:
        return cls(
            total_options=summary.total_options,
            quickest_time=summary.quickest_time,
            longest_time=summary.longest_time,
            average_time=summary.average_time,
            primary_activity_label=summary.primary_activity_label,
        )


class EffortBreakdownOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: EffortItemOutput
    alternatives: List[EffortItemOutput] = Field(default_factory=list)
    summary: BreakdownSummaryOutput

    @classmethod
    def from_domain(cls, breakdown: EffortBreakdown) -> EffortBreakdownOutput:
        return cls(
            primary=EffortItemOutput.from_domain(breakdown.primary),
            alternatives=[EffortItemOutput.from_domain(item) for item in breakdown.alternatives],
            summary=BreakdownSummaryOutput.from_domain(breakdown.summary()),
        )


class EffortResultOutput(BaseModel):
    """
    Effort calculation result.

    Attributes:
        dish: Dish the effort burns
        user: User data used for the calculation
        effort: Primary effort, alternatives and summary
    """

    model_config = ConfigDict(frozen=True)

    dish: DishOutput
    user: UserOutput
    effort: EffortBreakdownOutput

    @classmethod
    def from_domain(cls, request: EffortRequest, breakdown: EffortBreakdown) -> EffortResultOutput:
        return cls(
            dish=DishOutput.from_domain(request.dish),
            user=UserOutput.from_domain(request.user),
            effort=EffortBreakdownOutput.from_domain(breakdown),
        )


class IntensityComparisonOutput(BaseModel):
    """One effort per intensity band; a band is None when not applicable."""

    model_config = ConfigDict(frozen=True)

    dish: DishOutput
    light: Optional[EffortItemOutput] = None
    moderate: Optional[EffortItemOutput] = None
    vigorous: Optional[EffortItemOutput] = None

    @classmethod
    def from_domain(
        cls, request: EffortRequest, comparison: ComparativeBreakdown
    ) -> IntensityComparisonOutput:
        def convert(item: Optional[EffortItem]) -> Optional[EffortItemOutput]:
            return EffortItemOutput.from_domain(item) if item is not None else None

        return cls(
            dish=DishOutput.from_domain(request.dish),
            light=convert(comparison.light),
            moderate=convert(comparison.moderate),
            vigorous=convert(comparison.vigorous),
        )


class PolicyComparisonOutput(BaseModel):
    model_config = ConfigDict(frozen=True)

    dish: DishOutput
    baseline_policy: str
    alternative_policy: str
    baseline: EffortItemOutput
    alternative: EffortItemOutput
    minutes_difference: int

    @classmethod
    def from_domain(
        cls,
        request: EffortRequest,
        comparison: PolicyComparison,
        baseline_policy: str,
        alternative_policy: str,
    ) -> PolicyComparisonOutput:
        return cls(
            dish=DishOutput.from_domain(request.dish),
            baseline_policy=baseline_policy,
            alternative_policy=alternative_policy,
            baseline=EffortItemOutput.from_domain(comparison.baseline),
            alternative=EffortItemOutput.from_domain(comparison.alternative),
            minutes_difference=comparison.minutes_difference,
        )
