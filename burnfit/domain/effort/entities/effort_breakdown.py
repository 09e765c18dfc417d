"""EffortBreakdown aggregate - primary effort plus alternatives.

Invariant: no alternative shares the primary's activity key and
alternatives carry no duplicate keys. Construction always enforces it,
keeping the first occurrence of each key.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from burnfit.domain.shared.units import Minutes, round_half_up

from ..value_objects.effort_item import EffortItem

SHORT_OPTION_MINUTES = 30
QUICK_OPTION_MINUTES = 20


def _filter_alternatives(primary: EffortItem, items: Iterable[EffortItem]) -> Tuple[EffortItem, ...]:
    seen = {primary.activity_key}
    kept = []
    for item in items:
        if item.activity_key in seen:
            continue
        seen.add(item.activity_key)
        kept.append(item)
    return tuple(kept)


@dataclass(frozen=True)
class BreakdownSummary:
    """Aggregate figures over every activity of a breakdown."""

    total_options: int
    quickest_time: Minutes
    longest_time: Minutes
    average_time: Minutes
    primary_activity_label: str


@dataclass(frozen=True)
class EffortBreakdown:
    """Result of an effort calculation.

    Attributes:
        primary: Effort with the user's preferred (or default) activity
        alternatives: Other activities, primary key excluded, keys unique

    Example:
        >>> breakdown = EffortBreakdown.compose(walking, [jogging, walking, jogging])
        >>> [item.activity_key for item in breakdown.alternatives]
        ['jogging_general']
    """

    primary: EffortItem
    alternatives: Tuple[EffortItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "alternatives", _filter_alternatives(self.primary, self.alternatives))

    @classmethod
    def compose(cls, primary: EffortItem, alternatives: Iterable[EffortItem]) -> "EffortBreakdown":
        """Build a breakdown from a raw alternatives list.

        Items sharing the primary's key are dropped, then duplicates by key
        (first occurrence kept).
        """
        return cls(primary=primary, alternatives=tuple(alternatives))

    @classmethod
    def primary_only(cls, primary: EffortItem) -> "EffortBreakdown":
        return cls(primary=primary)

    # ===== Queries =====

    @property
    def all_activities(self) -> List[EffortItem]:
        return [self.primary, *self.alternatives]

    def has_alternatives(self) -> bool:
        return len(self.alternatives) > 0

    @property
    def alternative_count(self) -> int:
        return len(self.alternatives)

    def quickest_activity(self) -> EffortItem:
        """Fewest minutes; the first one wins on ties."""
        return min(self.all_activities, key=lambda item: item.minutes)

    def longest_activity(self) -> EffortItem:
        """Most minutes; the first one wins on ties."""
        return max(self.all_activities, key=lambda item: item.minutes)

    def activities_by_duration(self) -> List[EffortItem]:
        return sorted(self.all_activities, key=lambda item: item.minutes)

    def activities_by_intensity(self) -> List[EffortItem]:
        """Highest MET first."""
        return sorted(self.all_activities, key=lambda item: item.met_value, reverse=True)

    def activities_in_duration_range(self, min_minutes: int, max_minutes: int) -> List[EffortItem]:
        """Activities with min_minutes <= minutes <= max_minutes."""
        return [item for item in self.all_activities if min_minutes <= item.minutes <= max_minutes]

    def short_duration_activities(self) -> List[EffortItem]:
        return [item for item in self.all_activities if item.minutes < SHORT_OPTION_MINUTES]

    def has_quick_options(self) -> bool:
        return any(item.minutes < QUICK_OPTION_MINUTES for item in self.all_activities)

    def summary(self) -> BreakdownSummary:
        activities = self.all_activities
        total_minutes = sum(item.minutes for item in activities)
        return BreakdownSummary(
            total_options=len(activities),
            quickest_time=self.quickest_activity().minutes,
            longest_time=self.longest_activity().minutes,
            average_time=Minutes(round_half_up(total_minutes / len(activities))),
            primary_activity_label=self.primary.activity_label,
        )

    # ===== Transformations =====

    def with_additional_alternatives(self, items: Iterable[EffortItem]) -> "EffortBreakdown":
        """New breakdown with items appended, filtering rules re-applied."""
        return EffortBreakdown.compose(self.primary, [*self.alternatives, *items])

    def __str__(self) -> str:
        text = f"{self.primary.activity_label}: {self.primary.formatted_duration}"
        if self.has_alternatives():
            text += f" (+{self.alternative_count} alternatives)"
        return text


@dataclass(frozen=True)
class ComparativeBreakdown:
    """One effort per intensity band, for "how intensity changes time" views.

    A band is None when the catalog has no activity of that intensity.
    """

    light: Optional[EffortItem] = None
    moderate: Optional[EffortItem] = None
    vigorous: Optional[EffortItem] = None

    def available(self) -> List[EffortItem]:
        return [item for item in (self.light, self.moderate, self.vigorous) if item is not None]

    def is_empty(self) -> bool:
        return not self.available()


@dataclass(frozen=True)
class PolicyComparison:
    """Primary effort under two policies, side by side."""

    baseline: EffortItem
    alternative: EffortItem

    @property
    def minutes_difference(self) -> int:
        """Alternative minus baseline."""
        return self.alternative.minutes - self.baseline.minutes
