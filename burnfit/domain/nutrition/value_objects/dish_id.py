"""DishId value object."""

from dataclasses import dataclass

from burnfit.domain.shared.errors import InvalidDishError


@dataclass(frozen=True)
class DishId:
    """Identifier of a dish in a dish repository.

    Example:
        >>> str(DishId.from_string(" apple_raw "))
        'apple_raw'
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise InvalidDishError("DishId cannot be empty")

    @classmethod
    def from_string(cls, value: str) -> "DishId":
        return cls(value=(value or "").strip())

    def __str__(self) -> str:
        return self.value
