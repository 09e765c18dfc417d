"""Activity entity - a physical activity with its energy cost."""

from dataclasses import dataclass

from burnfit.domain.shared.errors import InvalidActivityError

from ..value_objects.activity_intensity import ActivityIntensity
from ..value_objects.met import Met


@dataclass(frozen=True, eq=False)
class Activity:
    """Physical activity identified by its key.

    Identity is the key alone: label and MET may be revised in the
    catalog without changing which activity it is.

    Attributes:
        key: Stable identifier (e.g. "walking_brisk")
        label: Display name
        met: Energy cost

    Example:
        >>> walking = Activity.define("walking_brisk", "Brisk walking", Met.of(3.5))
        >>> walking.is_moderate_intensity()
        True
    """

    key: str
    label: str
    met: Met

    def __post_init__(self) -> None:
        """Validate key and label.

        Raises:
            InvalidActivityError: If key or label is blank
        """
        if not self.key or not self.key.strip():
            raise InvalidActivityError("Activity key cannot be empty")
        if not self.label or not self.label.strip():
            raise InvalidActivityError("Activity label cannot be empty")

    @classmethod
    def define(cls, key: str, label: str, met: Met) -> "Activity":
        """Create an activity, trimming key and label."""
        return cls(key=(key or "").strip(), label=(label or "").strip(), met=met)

    @property
    def intensity(self) -> ActivityIntensity:
        return self.met.intensity

    def is_low_intensity(self) -> bool:
        return self.met.is_light_intensity()

    def is_moderate_intensity(self) -> bool:
        return self.met.is_moderate_intensity()

    def is_high_intensity(self) -> bool:
        return self.met.is_vigorous_intensity()

    def is_more_intense(self, other: "Activity") -> bool:
        """Compare intensity by MET value."""
        return self.met.value > other.met.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Activity):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.label} ({self.met})"
