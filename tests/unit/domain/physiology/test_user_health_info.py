"""Unit tests for UserHealthInfo and UserHealthInfoId."""

import pytest

from burnfit.domain.physiology.entities.user_health_info import (
    DEFAULT_ACTIVITY_KEYS,
    UserHealthInfo,
)
from burnfit.domain.physiology.value_objects.user_health_info_id import (
    PRIMARY_USER_ID,
    UserHealthInfoId,
)
from burnfit.domain.shared.errors import InvalidUserHealthInfoError


class TestUserHealthInfo:
    """Test biometric validation and derived values."""

    def test_create_valid_profile(self):
        user = UserHealthInfo.create("female", 60, 165, ["yoga_hatha", "walking_brisk"])

        assert user.weight == 60.0
        assert user.preferred_activity_keys == ("yoga_hatha", "walking_brisk")
        assert user.primary_activity_key == "yoga_hatha"

    @pytest.mark.parametrize("weight", [29.9, 300.1])
    def test_weight_out_of_range_raises(self, weight):
        with pytest.raises(InvalidUserHealthInfoError, match="Weight"):
            UserHealthInfo.create("male", weight, 175)

    @pytest.mark.parametrize("height", [119, 251])
    def test_height_out_of_range_raises(self, height):
        with pytest.raises(InvalidUserHealthInfoError, match="Height"):
            UserHealthInfo.create("male", 70, height)

    def test_range_bounds_are_inclusive(self):
        UserHealthInfo.create("male", 30, 120)
        UserHealthInfo.create("male", 300, 250)

    def test_average_profile(self):
        user = UserHealthInfo.average()

        assert user.weight == 70.0
        assert user.height == 170.0
        assert user.sex == "unspecified"
        assert user.preferred_activity_keys == DEFAULT_ACTIVITY_KEYS
        assert user.primary_activity_key == "walking_brisk"

    def test_no_preferences_has_no_primary_key(self):
        assert UserHealthInfo.create("male", 70, 175).primary_activity_key is None

    def test_list_preferences_stored_as_tuple(self):
        user = UserHealthInfo(sex="male", weight=70, height=175, preferred_activity_keys=["a", "b"])

        assert user.preferred_activity_keys == ("a", "b")

    def test_bmi(self):
        user = UserHealthInfo.create("male", 70, 175)

        # 70 / 1.75² = 22.857
        assert user.bmi() == 22.9
        assert user.bmi_category() == "normal"
        assert user.has_healthy_weight()

    @pytest.mark.parametrize(
        "weight,category",
        [(50, "underweight"), (90, "overweight"), (100, "obese")],
    )
    def test_bmi_categories(self, weight, category):
        assert UserHealthInfo.create("male", weight, 175).bmi_category() == category

    def test_with_preferred_activities_returns_copy(self):
        user = UserHealthInfo.average()

        updated = user.with_preferred_activities(["jogging_general"])

        assert updated.preferred_activity_keys == ("jogging_general",)
        assert user.preferred_activity_keys == DEFAULT_ACTIVITY_KEYS
        assert updated.user_id == user.user_id


class TestUserHealthInfoIdentity:
    """Each profile carries a UserHealthInfoId."""

    def test_create_generates_distinct_ids(self):
        first = UserHealthInfo.create("male", 70, 175)
        second = UserHealthInfo.create("male", 70, 175)

        assert isinstance(first.user_id, UserHealthInfoId)
        assert first.user_id != second.user_id

    def test_create_keeps_given_id(self):
        profile_id = UserHealthInfoId.generate()

        assert UserHealthInfo.create("female", 60, 165, user_id=profile_id).user_id == profile_id

    def test_average_profile_uses_primary_id(self):
        assert UserHealthInfo.average().user_id == UserHealthInfoId.primary()
        assert str(UserHealthInfo.average().user_id) == PRIMARY_USER_ID

    def test_direct_construction_generates_id(self):
        user = UserHealthInfo(sex="male", weight=70, height=175)

        assert isinstance(user.user_id, UserHealthInfoId)


class TestUserHealthInfoId:
    def test_generate_is_unique(self):
        assert UserHealthInfoId.generate() != UserHealthInfoId.generate()

    def test_round_trip_through_string(self):
        profile_id = UserHealthInfoId.generate()

        assert UserHealthInfoId.from_string(str(profile_id)) == profile_id

    @pytest.mark.parametrize("value", ["", "  ", "not-a-uuid"])
    def test_invalid_string_raises(self, value):
        with pytest.raises(InvalidUserHealthInfoError):
            UserHealthInfoId.from_string(value)

    def test_primary_id(self):
        assert str(UserHealthInfoId.primary()) == PRIMARY_USER_ID
