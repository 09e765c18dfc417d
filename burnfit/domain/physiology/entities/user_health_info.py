"""UserHealthInfo entity - user profile used for effort calculation."""

from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional, Tuple

from burnfit.domain.shared.errors import InvalidUserHealthInfoError
from burnfit.domain.shared.units import Centimeters, Kilograms

from ..value_objects.user_health_info_id import UserHealthInfoId

Sex = Literal["male", "female", "unspecified"]
BMICategory = Literal["underweight", "normal", "overweight", "obese"]

MIN_WEIGHT_KG = 30.0
MAX_WEIGHT_KG = 300.0
MIN_HEIGHT_CM = 120.0
MAX_HEIGHT_CM = 250.0

DEFAULT_ACTIVITY_KEYS: Tuple[str, ...] = (
    "walking_brisk",
    "jogging_general",
    "cycling_moderate",
    "swimming_leisurely",
    "weight_training_general",
)


@dataclass(frozen=True)
class UserHealthInfo:
    """User health profile.

    Carries what effort calculation needs from the user: body weight
    and preferred activities in priority order. Height and sex are kept
    for BMI display.

    Attributes:
        sex: Declared sex ("male", "female" or "unspecified")
        weight: Body weight in kg (30-300)
        height: Height in cm (120-250)
        preferred_activity_keys: Activity keys, most preferred first
        user_id: Profile identifier (generated when omitted)
    """

    sex: Sex
    weight: Kilograms
    height: Centimeters
    preferred_activity_keys: Tuple[str, ...] = field(default_factory=tuple)
    user_id: UserHealthInfoId = field(default_factory=UserHealthInfoId.generate)

    def __post_init__(self) -> None:
        """Validate biometric ranges.

        Raises:
            InvalidUserHealthInfoError: If weight or height is out of range
        """
        if self.weight < MIN_WEIGHT_KG or self.weight > MAX_WEIGHT_KG:
            raise InvalidUserHealthInfoError(
                f"Weight must be between {MIN_WEIGHT_KG:g} and {MAX_WEIGHT_KG:g} kg"
            )
        if self.height < MIN_HEIGHT_CM or self.height > MAX_HEIGHT_CM:
            raise InvalidUserHealthInfoError(
                f"Height must be between {MIN_HEIGHT_CM:g} and {MAX_HEIGHT_CM:g} cm"
            )
        # Accept lists from callers but store an immutable copy
        object.__setattr__(self, "preferred_activity_keys", tuple(self.preferred_activity_keys))

    @classmethod
    def create(
        cls,
        sex: Sex,
        weight: float,
        height: float,
        preferred_activities: Iterable[str] = (),
        user_id: Optional[UserHealthInfoId] = None,
    ) -> "UserHealthInfo":
        """Create a validated profile, with a new id unless one is given."""
        return cls(
            sex=sex,
            weight=Kilograms(float(weight)),
            height=Centimeters(float(height)),
            preferred_activity_keys=tuple(preferred_activities),
            user_id=user_id or UserHealthInfoId.generate(),
        )

    @classmethod
    def average(cls) -> "UserHealthInfo":
        """Profile for anonymous usage, based on population averages."""
        return cls(
            sex="unspecified",
            weight=Kilograms(70.0),
            height=Centimeters(170.0),
            preferred_activity_keys=DEFAULT_ACTIVITY_KEYS,
            user_id=UserHealthInfoId.primary(),
        )

    @property
    def primary_activity_key(self) -> Optional[str]:
        return self.preferred_activity_keys[0] if self.preferred_activity_keys else None

    def bmi(self) -> float:
        """Body Mass Index rounded to one decimal.

        Example:
            >>> UserHealthInfo.create("male", 70, 175).bmi()
            22.9
        """
        height_m = self.height / 100
        return round(self.weight / (height_m * height_m), 1)

    def bmi_category(self) -> BMICategory:
        bmi = self.bmi()
        if bmi < 18.5:
            return "underweight"
        if bmi < 25:
            return "normal"
        if bmi < 30:
            return "overweight"
        return "obese"

    def has_healthy_weight(self) -> bool:
        return self.bmi_category() == "normal"

    def with_preferred_activities(self, activity_keys: Iterable[str]) -> "UserHealthInfo":
        """Copy of this profile with new activity preferences."""
        return UserHealthInfo(
            sex=self.sex,
            weight=self.weight,
            height=self.height,
            preferred_activity_keys=tuple(activity_keys),
            user_id=self.user_id,
        )

    def __str__(self) -> str:
        return (
            f"UserHealthInfo({self.sex}, {self.weight:g}kg, "
            f"{self.height:g}cm, BMI: {self.bmi()})"
        )
