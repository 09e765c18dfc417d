"""Unit tests for effort policies."""

from types import SimpleNamespace

import pytest

from burnfit.domain.effort.policies.effort_policy import (
    ConservativeEffortPolicy,
    EffortPolicyFactory,
    ExperienceLevel,
    StandardMETEffortPolicy,
)
from burnfit.domain.shared.errors import InvalidEffortInputError


class TestStandardMETEffortPolicy:
    """Test the MET formula: kcal/min = MET × 3.5 × kg / 200."""

    def setup_method(self):
        """Set up test fixtures."""
        self.policy = StandardMETEffortPolicy()

    def test_apple_with_brisk_walking(self):
        # 95 / (3.5 × 3.5 × 70 / 200) = 22.16
        assert self.policy.minutes_to_burn(95, 70, 3.5) == 22

    def test_pizza_with_jogging(self):
        # 540 / (7.0 × 3.5 × 70 / 200) = 62.97
        assert self.policy.minutes_to_burn(540, 70, 7.0) == 63

    def test_minimum_one_minute(self):
        assert self.policy.minutes_to_burn(0.1, 70, 12.0) == 1

    def test_calorie_burn_rate(self):
        assert self.policy.calorie_burn_rate(70, 7.0) == pytest.approx(8.575)

    def test_calories_burned_is_inverse(self):
        # 63 × 8.575 = 540.2
        assert self.policy.calories_burned(63, 70, 7.0) == 540

    @pytest.mark.parametrize(
        "calories,weight,met",
        [(0, 70, 3.5), (-1, 70, 3.5), (95, 0, 3.5), (95, 70, 0), (95, 70, -2)],
    )
    def test_non_positive_inputs_raise(self, calories, weight, met):
        with pytest.raises(InvalidEffortInputError):
            self.policy.minutes_to_burn(calories, weight, met)

    def test_calories_burned_requires_positive_minutes(self):
        with pytest.raises(InvalidEffortInputError):
            self.policy.calories_burned(0, 70, 3.5)

    def test_minutes_grow_with_calories(self):
        minutes = [self.policy.minutes_to_burn(c, 70, 5.0) for c in range(50, 1500, 25)]

        assert minutes == sorted(minutes)

    def test_minutes_shrink_with_met_and_weight(self):
        by_met = [self.policy.minutes_to_burn(600, 70, met) for met in (2.0, 3.5, 5.0, 7.0, 10.0)]
        by_weight = [self.policy.minutes_to_burn(600, w, 5.0) for w in (50, 70, 90, 120)]

        assert by_met == sorted(by_met, reverse=True)
        assert by_weight == sorted(by_weight, reverse=True)


class TestConservativeEffortPolicy:
    def test_adds_margin_to_standard_result(self):
        # 63 + round(63 × 0.10) = 69
        assert ConservativeEffortPolicy(10).minutes_to_burn(540, 70, 7.0) == 69

    def test_default_margin_is_ten_percent(self):
        assert ConservativeEffortPolicy().safety_margin_percent == 10

    def test_zero_margin_equals_standard(self):
        standard = StandardMETEffortPolicy()
        conservative = ConservativeEffortPolicy(0)

        for calories in (95, 250, 540, 1200):
            assert conservative.minutes_to_burn(calories, 70, 3.5) == standard.minutes_to_burn(
                calories, 70, 3.5
            )

    def test_never_below_standard(self):
        standard = StandardMETEffortPolicy()
        conservative = ConservativeEffortPolicy(10)

        for calories in (5, 95, 540):
            assert conservative.minutes_to_burn(calories, 70, 7.0) >= standard.minutes_to_burn(
                calories, 70, 7.0
            )

    def test_negative_margin_raises(self):
        with pytest.raises(InvalidEffortInputError):
            ConservativeEffortPolicy(-5)

    def test_propagates_input_guards(self):
        with pytest.raises(InvalidEffortInputError):
            ConservativeEffortPolicy().minutes_to_burn(0, 70, 7.0)


class TestEffortPolicyFactory:
    def test_standard(self):
        assert isinstance(EffortPolicyFactory.standard(), StandardMETEffortPolicy)

    def test_conservative(self):
        policy = EffortPolicyFactory.conservative(20)

        assert isinstance(policy, ConservativeEffortPolicy)
        assert policy.safety_margin_percent == 20

    @pytest.mark.parametrize(
        "level,expected",
        [
            # 63 + round(9.45)
            (ExperienceLevel.BEGINNER, 72),
            # 63 + round(3.15)
            (ExperienceLevel.INTERMEDIATE, 66),
            (ExperienceLevel.ADVANCED, 63),
        ],
    )
    def test_for_user_level(self, level, expected):
        policy = EffortPolicyFactory.for_user_level(level)

        assert policy.minutes_to_burn(540, 70, 7.0) == expected

    def test_for_user_level_accepts_string(self):
        assert isinstance(EffortPolicyFactory.for_user_level("advanced"), StandardMETEffortPolicy)

    def test_from_settings(self):
        settings = SimpleNamespace(effort_policy="conservative", safety_margin_percent=15)

        policy = EffortPolicyFactory.from_settings(settings)

        assert isinstance(policy, ConservativeEffortPolicy)
        assert policy.safety_margin_percent == 15

    def test_from_settings_unknown_policy(self):
        settings = SimpleNamespace(effort_policy="aggressive", safety_margin_percent=0)

        with pytest.raises(ValueError, match="Unknown effort policy"):
            EffortPolicyFactory.from_settings(settings)
