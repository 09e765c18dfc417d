"""Met value object - Metabolic Equivalent of Task."""

from dataclasses import dataclass

from burnfit.domain.shared.errors import InvalidMetError

from .activity_intensity import ActivityIntensity

MAX_MET = 25.0


@dataclass(frozen=True)
class Met:
    """Energy cost of a physical activity as a multiple of resting rate.

    1 MET is the energy cost of sitting quietly (3.5 mL O2/kg/min).

    Attributes:
        value: MET value, strictly positive and at most 25

    Example:
        >>> Met.of(3.5).intensity
        <ActivityIntensity.MODERATE: 'moderate'>
    """

    value: float

    def __post_init__(self) -> None:
        """Validate MET range.

        Raises:
            InvalidMetError: If value is not in (0, 25]
        """
        if self.value <= 0:
            raise InvalidMetError("MET value must be positive")
        if self.value > MAX_MET:
            raise InvalidMetError(f"MET value too high (max {MAX_MET:g} METs)")

    @classmethod
    def of(cls, value: float) -> "Met":
        """Create a validated MET value."""
        return cls(value=float(value))

    def to_number(self) -> float:
        return self.value

    @property
    def intensity(self) -> ActivityIntensity:
        return ActivityIntensity.from_met(self.value)

    def is_light_intensity(self) -> bool:
        """Light intensity (<3 METs)."""
        return self.intensity is ActivityIntensity.LIGHT

    def is_moderate_intensity(self) -> bool:
        """Moderate intensity (3-6 METs)."""
        return self.intensity is ActivityIntensity.MODERATE

    def is_vigorous_intensity(self) -> bool:
        """Vigorous intensity (>=6 METs)."""
        return self.intensity is ActivityIntensity.VIGOROUS

    def __str__(self) -> str:
        return f"{self.value:g} METs"
