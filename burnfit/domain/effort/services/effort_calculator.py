"""EffortCalculator - dish calories to activity durations.

Selects a primary activity for the user, a handful of alternatives,
and asks the effort policy for minutes for each of them.

Primary selection (first hit wins):
1. User's preferred activity keys, in priority order
2. User's primary activity key
3. First catalog default
4. NoSuitableActivityError

Alternatives (at most 5), drawn from the full catalog when available:
1. First activity noticeably lighter than the primary (MET < 0.7x)
2. First activity noticeably harder than the primary (MET > 1.3x)
3. Up to 2 other preferred activities
4. Catalog defaults to fill the remaining slots
"""

from typing import Iterable, List, Optional

import structlog

from burnfit.domain.physiology.entities.activity import Activity
from burnfit.domain.physiology.ports.activity_catalog import ActivityCatalog, CatalogCapability
from burnfit.domain.physiology.value_objects.activity_intensity import ActivityIntensity
from burnfit.domain.shared.errors import InvalidEffortRequestError, NoSuitableActivityError

from ..entities.effort_breakdown import (
    ComparativeBreakdown,
    EffortBreakdown,
    PolicyComparison,
)
from ..policies.effort_policy import ConservativeEffortPolicy, EffortPolicy
from ..value_objects.effort_item import EffortItem
from ..value_objects.effort_request import EffortRequest

logger = structlog.get_logger(__name__)

MAX_ALTERNATIVES = 5
MAX_PREFERRED_ALTERNATIVES = 2
LIGHTER_MET_RATIO = 0.7
HARDER_MET_RATIO = 1.3

QUICK_MAX_MINUTES = 30
ENDURANCE_MIN_MINUTES = 45


class EffortCalculator:
    """Compute effort breakdowns for effort requests.

    Args:
        activity_catalog: Source of activities
        effort_policy: Minutes computation

    Example:
        >>> calculator = EffortCalculator(StaticActivityCatalog(), StandardMETEffortPolicy())
        >>> breakdown = calculator.calculate_effort(EffortRequest.of(dish, user))
        >>> breakdown.primary.formatted_duration
        '22 min'
    """

    def __init__(self, activity_catalog: ActivityCatalog, effort_policy: EffortPolicy):
        self._catalog = activity_catalog
        self._policy = effort_policy

    @property
    def effort_policy(self) -> EffortPolicy:
        return self._policy

    def calculate_effort(self, request: EffortRequest) -> EffortBreakdown:
        """Compute the primary effort and alternatives.

        Raises:
            InvalidEffortRequestError: If request is None
            NoSuitableActivityError: If no primary activity can be resolved
        """
        return self._calculate(request, self._policy)

    def calculate_effort_with_policy(
        self, request: EffortRequest, policy: EffortPolicy
    ) -> EffortBreakdown:
        """Same as calculate_effort, with another policy for this call only."""
        return self._calculate(request, policy)

    def calculate_multiple_efforts(self, requests: Iterable[EffortRequest]) -> List[EffortBreakdown]:
        return [self.calculate_effort(request) for request in requests]

    def get_quick_recommendations(self, request: EffortRequest) -> Optional[EffortBreakdown]:
        """Vigorous activities done within 30 minutes, quickest first.

        Returns:
            Breakdown with the quickest as primary, or None if none qualifies
        """
        self._require(request)
        items = self._items_for_intensity(request, ActivityIntensity.VIGOROUS)
        candidates = sorted(
            (item for item in items if item.minutes <= QUICK_MAX_MINUTES),
            key=lambda item: item.minutes,
        )
        if not candidates:
            return None
        return EffortBreakdown.compose(candidates[0], candidates[1:])

    def get_endurance_recommendations(self, request: EffortRequest) -> Optional[EffortBreakdown]:
        """Moderate activities lasting at least 45 minutes, shortest first.

        Returns:
            Breakdown with the shortest as primary, or None if none qualifies
        """
        self._require(request)
        items = self._items_for_intensity(request, ActivityIntensity.MODERATE)
        candidates = sorted(
            (item for item in items if item.minutes >= ENDURANCE_MIN_MINUTES),
            key=lambda item: item.minutes,
        )
        if not candidates:
            return None
        return EffortBreakdown.compose(candidates[0], candidates[1:])

    def get_comparative_breakdown(self, request: EffortRequest) -> ComparativeBreakdown:
        """Effort with the first catalog activity of each intensity band."""
        self._require(request)
        if not self._catalog.supports(CatalogCapability.INTENSITY_INDEX):
            self._log_degraded(CatalogCapability.INTENSITY_INDEX, "comparative_breakdown")

        def first_item(intensity: ActivityIntensity) -> Optional[EffortItem]:
            activities = self._catalog.get_by_intensity(intensity)
            if not activities:
                return None
            return self._to_item(request, activities[0], self._policy)

        return ComparativeBreakdown(
            light=first_item(ActivityIntensity.LIGHT),
            moderate=first_item(ActivityIntensity.MODERATE),
            vigorous=first_item(ActivityIntensity.VIGOROUS),
        )

    def compare_policies(
        self, request: EffortRequest, alternative_policy: Optional[EffortPolicy] = None
    ) -> PolicyComparison:
        """Primary effort under this calculator's policy and another one.

        Args:
            request: Effort request
            alternative_policy: Policy to compare with (conservative 10% if omitted)
        """
        if alternative_policy is None:
            alternative_policy = ConservativeEffortPolicy()
        baseline = self._calculate(request, self._policy)
        alternative = self._calculate(request, alternative_policy)
        return PolicyComparison(baseline=baseline.primary, alternative=alternative.primary)

    # ===== Internals =====

    def _calculate(self, request: EffortRequest, policy: EffortPolicy) -> EffortBreakdown:
        self._require(request)

        primary = self._select_primary_activity(request)
        alternatives = self._select_alternatives(primary, request)

        breakdown = EffortBreakdown.compose(
            self._to_item(request, primary, policy),
            [self._to_item(request, activity, policy) for activity in alternatives],
        )

        logger.debug(
            "effort_calculated",
            dish=request.dish.name,
            calories=request.calories,
            policy=policy.name,
            primary=breakdown.primary.activity_key,
            minutes=breakdown.primary.minutes,
            alternatives=breakdown.alternative_count,
        )
        return breakdown

    @staticmethod
    def _require(request: Optional[EffortRequest]) -> None:
        if request is None:
            raise InvalidEffortRequestError("Effort request is required")

    def _select_primary_activity(self, request: EffortRequest) -> Activity:
        for key in request.preferred_activity_keys:
            activity = self._catalog.get_by_key(key)
            if activity is not None:
                return activity

        primary_key = request.primary_activity_key
        if primary_key:
            activity = self._catalog.get_by_key(primary_key)
            if activity is not None:
                return activity

        defaults = self._catalog.list_defaults()
        if defaults:
            return defaults[0]

        raise NoSuitableActivityError()

    def _select_alternatives(self, primary: Activity, request: EffortRequest) -> List[Activity]:
        if self._catalog.supports(CatalogCapability.FULL_LISTING):
            pool = self._catalog.get_all()
        else:
            self._log_degraded(CatalogCapability.FULL_LISTING, "alternatives")
            pool = self._catalog.list_defaults()

        candidates = [activity for activity in pool if activity.key != primary.key]
        primary_met = primary.met.value
        picked: List[Activity] = []

        lighter = next(
            (a for a in candidates if a.met.value < primary_met * LIGHTER_MET_RATIO), None
        )
        if lighter is not None:
            picked.append(lighter)

        harder = next(
            (a for a in candidates if a.met.value > primary_met * HARDER_MET_RATIO), None
        )
        if harder is not None:
            picked.append(harder)

        preferred_keys = set(request.preferred_activity_keys)
        preferred = [a for a in candidates if a.key in preferred_keys][:MAX_PREFERRED_ALTERNATIVES]
        for activity in preferred:
            if activity not in picked:
                picked.append(activity)

        defaults = [a for a in self._catalog.list_defaults() if a.key != primary.key]
        for activity in defaults[: MAX_ALTERNATIVES - len(picked)]:
            if activity not in picked:
                picked.append(activity)

        return picked[:MAX_ALTERNATIVES]

    def _items_for_intensity(
        self, request: EffortRequest, intensity: ActivityIntensity
    ) -> List[EffortItem]:
        if not self._catalog.supports(CatalogCapability.INTENSITY_INDEX):
            self._log_degraded(CatalogCapability.INTENSITY_INDEX, f"{intensity.value}_recommendations")
        return [
            self._to_item(request, activity, self._policy)
            for activity in self._catalog.get_by_intensity(intensity)
        ]

    @staticmethod
    def _to_item(request: EffortRequest, activity: Activity, policy: EffortPolicy) -> EffortItem:
        minutes = policy.minutes_to_burn(request.calories, request.user_weight, activity.met.value)
        return EffortItem.of(activity.key, activity.label, minutes, activity.met.value)

    def _log_degraded(self, capability: CatalogCapability, operation: str) -> None:
        logger.info(
            "catalog_capability_missing",
            capability=capability.value,
            operation=operation,
            catalog=type(self._catalog).__name__,
        )
