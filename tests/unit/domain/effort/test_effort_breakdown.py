"""Unit tests for EffortBreakdown and its companion result types."""

import pytest

from burnfit.domain.effort.entities.effort_breakdown import (
    ComparativeBreakdown,
    EffortBreakdown,
    PolicyComparison,
)
from burnfit.domain.effort.value_objects.effort_item import EffortItem


@pytest.fixture
def walking():
    return EffortItem.of("walking_brisk", "Brisk walking", 22, 3.5)


@pytest.fixture
def jogging():
    return EffortItem.of("jogging_general", "Jogging", 11, 7.0)


@pytest.fixture
def stretching():
    return EffortItem.of("stretching", "Stretching", 34, 2.3)


@pytest.fixture
def breakdown(walking, jogging, stretching):
    return EffortBreakdown.compose(walking, [jogging, stretching])


def _assert_invariant(breakdown):
    keys = [item.activity_key for item in breakdown.alternatives]
    assert breakdown.primary.activity_key not in keys
    assert len(keys) == len(set(keys))


class TestCompose:
    """Primary exclusion and de-duplication."""

    def test_excludes_primary_key(self, walking, jogging):
        other_walking = EffortItem.of("walking_brisk", "Brisk walking", 30, 3.5)

        result = EffortBreakdown.compose(walking, [other_walking, jogging])

        assert result.alternatives == (jogging,)

    def test_keeps_first_occurrence_of_duplicates(self, walking, jogging):
        later_jogging = EffortItem.of("jogging_general", "Jogging", 40, 7.0)

        result = EffortBreakdown.compose(walking, [jogging, later_jogging, jogging])

        assert len(result.alternatives) == 1
        assert result.alternatives[0].minutes == 11

    def test_direct_construction_enforces_rules(self, walking, jogging):
        result = EffortBreakdown(primary=walking, alternatives=(walking, jogging, jogging))

        _assert_invariant(result)
        assert result.alternative_count == 1

    def test_primary_only(self, walking):
        result = EffortBreakdown.primary_only(walking)

        assert not result.has_alternatives()
        assert result.all_activities == [walking]

    def test_with_additional_alternatives(self, breakdown, walking, jogging):
        cycling = EffortItem.of("cycling_moderate", "Cycling", 11, 6.8)

        extended = breakdown.with_additional_alternatives([walking, jogging, cycling, cycling])

        _assert_invariant(extended)
        assert [i.activity_key for i in extended.alternatives] == [
            "jogging_general",
            "stretching",
            "cycling_moderate",
        ]
        assert breakdown.alternative_count == 2


class TestQueries:
    def test_all_activities_starts_with_primary(self, breakdown, walking):
        assert breakdown.all_activities[0] == walking
        assert len(breakdown.all_activities) == 3

    def test_quickest_and_longest(self, breakdown):
        assert breakdown.quickest_activity().activity_key == "jogging_general"
        assert breakdown.longest_activity().activity_key == "stretching"

    def test_first_wins_on_ties(self, walking):
        cycling = EffortItem.of("cycling_moderate", "Cycling", 22, 6.8)

        result = EffortBreakdown.compose(walking, [cycling])

        assert result.quickest_activity() is walking
        assert result.longest_activity() is walking

    def test_sorted_by_duration(self, breakdown):
        assert [i.minutes for i in breakdown.activities_by_duration()] == [11, 22, 34]

    def test_sorted_by_intensity(self, breakdown):
        assert [i.met_value for i in breakdown.activities_by_intensity()] == [7.0, 3.5, 2.3]

    def test_duration_range_is_inclusive(self, breakdown):
        keys = [i.activity_key for i in breakdown.activities_in_duration_range(11, 22)]

        assert keys == ["walking_brisk", "jogging_general"]

    def test_short_and_quick_options(self, breakdown):
        assert [i.minutes for i in breakdown.short_duration_activities()] == [22, 11]
        assert breakdown.has_quick_options()

    def test_no_quick_options(self, stretching):
        assert not EffortBreakdown.primary_only(stretching).has_quick_options()

    def test_summary(self, breakdown):
        summary = breakdown.summary()

        assert summary.total_options == 3
        assert summary.quickest_time == 11
        assert summary.longest_time == 34
        # (22 + 11 + 34) / 3 = 22.33
        assert summary.average_time == 22
        assert summary.primary_activity_label == "Brisk walking"

    def test_summary_average_rounds_half_up(self):
        result = EffortBreakdown.compose(
            EffortItem.of("a", "A", 10, 3.0), [EffortItem.of("b", "B", 11, 3.0)]
        )

        assert result.summary().average_time == 11

    def test_str(self, breakdown, walking):
        assert str(breakdown) == "Brisk walking: 22 min (+2 alternatives)"
        assert str(EffortBreakdown.primary_only(walking)) == "Brisk walking: 22 min"


class TestComparisonResults:
    def test_comparative_breakdown(self, walking, jogging):
        comparison = ComparativeBreakdown(moderate=walking, vigorous=jogging)

        assert comparison.available() == [walking, jogging]
        assert not comparison.is_empty()
        assert ComparativeBreakdown().is_empty()

    def test_policy_comparison_difference(self):
        comparison = PolicyComparison(
            baseline=EffortItem.of("jogging", "Jogging", 63, 7.0),
            alternative=EffortItem.of("jogging", "Jogging", 69, 7.0),
        )

        assert comparison.minutes_difference == 6
