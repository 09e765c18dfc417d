"""ActivityIntensity value object - intensity band derived from MET."""

from enum import Enum


class ActivityIntensity(str, Enum):
    """Exercise intensity band.

    Bands follow the Compendium of Physical Activities:
    - LIGHT: below 3 METs (slow walking, stretching)
    - MODERATE: 3 to below 6 METs (brisk walking, leisure cycling)
    - VIGOROUS: 6 METs and above (jogging, swimming laps)
    """

    LIGHT = "light"
    MODERATE = "moderate"
    VIGOROUS = "vigorous"

    @classmethod
    def from_met(cls, met_value: float) -> "ActivityIntensity":
        """Classify a raw MET value.

        Example:
            >>> ActivityIntensity.from_met(3.5)
            <ActivityIntensity.MODERATE: 'moderate'>
        """
        if met_value < 3.0:
            return cls.LIGHT
        if met_value < 6.0:
            return cls.MODERATE
        return cls.VIGOROUS
