"""Unit tests for Met, ActivityIntensity and Activity."""

import pytest

from burnfit.domain.physiology.entities.activity import Activity
from burnfit.domain.physiology.value_objects.activity_intensity import ActivityIntensity
from burnfit.domain.physiology.value_objects.met import Met
from burnfit.domain.shared.errors import InvalidActivityError, InvalidMetError


class TestMet:
    """Test MET validation and intensity bands."""

    def test_valid_met(self):
        met = Met.of(3.5)

        assert met.value == 3.5
        assert met.to_number() == 3.5
        assert str(met) == "3.5 METs"

    @pytest.mark.parametrize("value", [0, -1.0])
    def test_non_positive_met_raises(self, value):
        with pytest.raises(InvalidMetError, match="positive"):
            Met.of(value)

    def test_met_above_maximum_raises(self):
        with pytest.raises(InvalidMetError, match="too high"):
            Met.of(25.1)

    def test_maximum_met_accepted(self):
        assert Met.of(25).value == 25.0

    @pytest.mark.parametrize(
        "value,intensity",
        [
            (2.9, ActivityIntensity.LIGHT),
            (3.0, ActivityIntensity.MODERATE),
            (5.9, ActivityIntensity.MODERATE),
            (6.0, ActivityIntensity.VIGOROUS),
        ],
    )
    def test_intensity_boundaries(self, value, intensity):
        assert Met.of(value).intensity is intensity

    def test_intensity_predicates(self):
        assert Met.of(2.0).is_light_intensity()
        assert Met.of(4.0).is_moderate_intensity()
        assert Met.of(8.0).is_vigorous_intensity()
        assert not Met.of(8.0).is_moderate_intensity()

    def test_equality_by_value(self):
        assert Met.of(7) == Met.of(7.0)


class TestActivity:
    """Test Activity construction and identity."""

    def test_define_trims_key_and_label(self):
        activity = Activity.define("  walking_brisk ", " Brisk walking ", Met.of(3.5))

        assert activity.key == "walking_brisk"
        assert activity.label == "Brisk walking"

    @pytest.mark.parametrize("key,label", [("", "Walking"), ("   ", "Walking"), ("walk", " ")])
    def test_blank_key_or_label_raises(self, key, label):
        with pytest.raises(InvalidActivityError):
            Activity.define(key, label, Met.of(3.0))

    def test_equality_by_key_only(self):
        first = Activity.define("jogging", "Jogging", Met.of(7.0))
        relabelled = Activity.define("jogging", "Footing", Met.of(8.0))

        assert first == relabelled
        assert hash(first) == hash(relabelled)
        assert len({first, relabelled}) == 1

    def test_intensity_helpers(self):
        yoga = Activity.define("yoga", "Yoga", Met.of(2.5))
        running = Activity.define("running", "Running", Met.of(9.8))

        assert yoga.is_low_intensity()
        assert running.is_high_intensity()
        assert running.intensity is ActivityIntensity.VIGOROUS
        assert running.is_more_intense(yoga)
        assert not yoga.is_more_intense(running)

    def test_str(self):
        assert str(Activity.define("yoga", "Yoga", Met.of(2.5))) == "Yoga (2.5 METs)"
