"""Effort queries."""

from .calculate_effort import CalculateEffortQuery, CalculateEffortQueryHandler
from .compare import (
    CompareIntensityQuery,
    CompareIntensityQueryHandler,
    ComparePoliciesQuery,
    ComparePoliciesQueryHandler,
)
from .recommendations import (
    EnduranceRecommendationsQuery,
    EnduranceRecommendationsQueryHandler,
    QuickRecommendationsQuery,
    QuickRecommendationsQueryHandler,
)

__all__ = [
    "CalculateEffortQuery",
    "CalculateEffortQueryHandler",
    "CompareIntensityQuery",
    "CompareIntensityQueryHandler",
    "ComparePoliciesQuery",
    "ComparePoliciesQueryHandler",
    "EnduranceRecommendationsQuery",
    "EnduranceRecommendationsQueryHandler",
    "QuickRecommendationsQuery",
    "QuickRecommendationsQueryHandler",
]
