"""EffortPolicy - how long an activity takes to burn a calorie amount.

The policy is the single place where the MET formula lives. The
calculator asks it for minutes and never computes durations itself.

Formula:
    kcal/min = MET × 3.5 × weight_kg / 200
    minutes  = max(1, round(calories / (kcal/min)))

All rounding is half-up.
"""

from abc import ABC, abstractmethod
from enum import Enum

from burnfit.domain.shared.errors import InvalidEffortInputError
from burnfit.domain.shared.units import Kilocalories, Kilograms, Minutes, round_half_up

OXYGEN_ML_PER_KG_MIN = 3.5
KCAL_DIVISOR = 200.0
MIN_MINUTES = 1

DEFAULT_SAFETY_MARGIN_PERCENT = 10.0


class EffortPolicy(ABC):
    """Port: minutes needed to burn calories with a given activity."""

    @abstractmethod
    def minutes_to_burn(self, calories: Kilocalories, weight_kg: Kilograms, met: float) -> Minutes:
        """Minutes of activity that burn the given calories.

        Args:
            calories: Energy to burn (kcal)
            weight_kg: User body weight
            met: Activity MET value

        Returns:
            Whole minutes, at least 1

        Raises:
            InvalidEffortInputError: If any input is not positive
        """

    @property
    def name(self) -> str:
        return type(self).__name__


class StandardMETEffortPolicy(EffortPolicy):
    """Compendium MET formula with half-up rounding.

    Example:
        >>> policy = StandardMETEffortPolicy()
        >>> policy.minutes_to_burn(Kilocalories(95), Kilograms(70), 3.5)
        22
    """

    def minutes_to_burn(self, calories: Kilocalories, weight_kg: Kilograms, met: float) -> Minutes:
        rate = self.calorie_burn_rate(weight_kg, met)
        if calories <= 0:
            raise InvalidEffortInputError("Calories must be positive")
        return Minutes(max(MIN_MINUTES, round_half_up(calories / rate)))

    def calorie_burn_rate(self, weight_kg: Kilograms, met: float) -> float:
        """Calories burned per minute (kcal/min)."""
        if weight_kg <= 0:
            raise InvalidEffortInputError("Weight must be positive")
        if met <= 0:
            raise InvalidEffortInputError("MET value must be positive")
        return met * OXYGEN_ML_PER_KG_MIN * weight_kg / KCAL_DIVISOR

    def calories_burned(self, minutes: Minutes, weight_kg: Kilograms, met: float) -> Kilocalories:
        """Inverse of minutes_to_burn, rounded half-up to whole kcal."""
        if minutes <= 0:
            raise InvalidEffortInputError("Duration must be positive")
        rate = self.calorie_burn_rate(weight_kg, met)
        return Kilocalories(float(round_half_up(minutes * rate)))


class ConservativeEffortPolicy(EffortPolicy):
    """Standard result plus a safety margin.

    Gives users a slightly longer target so that burned calories are not
    overestimated. The margin is added on the rounded standard minutes.

    Example:
        >>> ConservativeEffortPolicy(10).minutes_to_burn(Kilocalories(540), Kilograms(70), 7.0)
        69
    """

    def __init__(self, safety_margin_percent: float = DEFAULT_SAFETY_MARGIN_PERCENT) -> None:
        if safety_margin_percent < 0:
            raise InvalidEffortInputError("Safety margin cannot be negative")
        self.safety_margin_percent = safety_margin_percent
        self._standard = StandardMETEffortPolicy()

    def minutes_to_burn(self, calories: Kilocalories, weight_kg: Kilograms, met: float) -> Minutes:
        standard = self._standard.minutes_to_burn(calories, weight_kg, met)
        margin = round_half_up(standard * self.safety_margin_percent / 100)
        return Minutes(standard + margin)


class ExperienceLevel(str, Enum):
    """Training experience, used to pick a safety margin."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class EffortPolicyFactory:
    """Named constructors for effort policies."""

    @staticmethod
    def standard() -> EffortPolicy:
        return StandardMETEffortPolicy()

    @staticmethod
    def conservative(safety_margin_percent: float = DEFAULT_SAFETY_MARGIN_PERCENT) -> EffortPolicy:
        return ConservativeEffortPolicy(safety_margin_percent)

    @staticmethod
    def for_user_level(level: ExperienceLevel) -> EffortPolicy:
        """Beginners get a 15% margin, intermediates 5%, advanced none."""
        level = ExperienceLevel(level)
        if level is ExperienceLevel.BEGINNER:
            return ConservativeEffortPolicy(15)
        if level is ExperienceLevel.INTERMEDIATE:
            return ConservativeEffortPolicy(5)
        return StandardMETEffortPolicy()

    @staticmethod
    def from_settings(settings) -> EffortPolicy:
        """Build the policy named by ``settings.effort_policy``.

        Args:
            settings: Object exposing ``effort_policy`` ("standard" or
                "conservative") and ``safety_margin_percent``

        Raises:
            ValueError: If the policy name is unknown
        """
        if settings.effort_policy == "standard":
            return StandardMETEffortPolicy()
        if settings.effort_policy == "conservative":
            return ConservativeEffortPolicy(settings.safety_margin_percent)
        raise ValueError(f"Unknown effort policy: {settings.effort_policy}")
