"""EffortItem value object - time needed with one activity."""

from dataclasses import dataclass
from enum import Enum

from burnfit.domain.shared.errors import InvalidEffortItemError
from burnfit.domain.shared.units import Minutes

LONG_DURATION_MINUTES = 60
SHORT_DURATION_MINUTES = 15


class EffortDescription(str, Enum):
    """Qualitative duration band."""

    QUICK = "Quick"  # < 10 min
    MODERATE = "Moderate"  # < 30 min
    SUBSTANTIAL = "Substantial"  # < 60 min
    EXTENDED = "Extended"  # >= 60 min


@dataclass(frozen=True, eq=False)
class EffortItem:
    """Minutes of one activity needed to burn a dish.

    Two items are equal when they name the same activity for the same
    duration; label and MET are display data.

    Attributes:
        activity_key: Activity identifier
        activity_label: Display name
        minutes: Whole minutes, at least 1
        met_value: Activity MET value (positive)

    Example:
        >>> EffortItem.of("jogging_general", "Jogging", 75, 7.0).formatted_duration
        '1h 15min'
    """

    activity_key: str
    activity_label: str
    minutes: Minutes
    met_value: float

    def __post_init__(self) -> None:
        if not self.activity_key or not self.activity_key.strip():
            raise InvalidEffortItemError("Activity key cannot be empty")
        if not self.activity_label or not self.activity_label.strip():
            raise InvalidEffortItemError("Activity label cannot be empty")
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise InvalidEffortItemError("Minutes must be a whole number")
        if self.minutes < 1:
            raise InvalidEffortItemError("Minutes must be at least 1")
        if self.met_value <= 0:
            raise InvalidEffortItemError("MET value must be positive")

    @classmethod
    def of(cls, activity_key: str, activity_label: str, minutes: int, met_value: float) -> "EffortItem":
        return cls(
            activity_key=(activity_key or "").strip(),
            activity_label=(activity_label or "").strip(),
            minutes=minutes,
            met_value=met_value,
        )

    @property
    def effort_description(self) -> EffortDescription:
        if self.minutes < 10:
            return EffortDescription.QUICK
        if self.minutes < 30:
            return EffortDescription.MODERATE
        if self.minutes < 60:
            return EffortDescription.SUBSTANTIAL
        return EffortDescription.EXTENDED

    @property
    def formatted_duration(self) -> str:
        """Duration text: "45 min", "2h" or "1h 15min"."""
        if self.minutes < 60:
            return f"{self.minutes} min"
        hours, remaining = divmod(self.minutes, 60)
        if remaining == 0:
            return f"{hours}h"
        return f"{hours}h {remaining}min"

    def is_long_duration(self) -> bool:
        return self.minutes > LONG_DURATION_MINUTES

    def is_short_duration(self) -> bool:
        return self.minutes < SHORT_DURATION_MINUTES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EffortItem):
            return NotImplemented
        return (self.activity_key, self.minutes) == (other.activity_key, other.minutes)

    def __hash__(self) -> int:
        return hash((self.activity_key, self.minutes))

    def __str__(self) -> str:
        return f"{self.activity_label}: {self.formatted_duration}"
