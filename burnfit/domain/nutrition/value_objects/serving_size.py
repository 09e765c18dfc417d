"""ServingSize value object.

Immutable amount + unit pair with its resolved gram equivalent.
Instances are built only through factory methods, which compute the
gram equivalent from the fixed per-unit conversion table.
"""

import re
from dataclasses import dataclass
from decimal import Decimal

from burnfit.domain.shared.errors import InvalidPortionUnitError, InvalidServingSizeError
from burnfit.domain.shared.units import Grams, round_half_up

from .portion_unit import GRAMS_PER_UNIT, PortionUnit

_NUMBER_PATTERN = re.compile(r"(-?\d+(?:[.,]\d+)?)")


def format_amount(amount: float) -> str:
    """Render an amount in plain decimal notation, without a trailing ".0".

    Every digit of the float is kept and exponent notation is never used,
    so the text parses back to the same amount.

    Examples:
        >>> format_amount(1.0), format_amount(1.5), format_amount(1e6)
        ('1', '1.5', '1000000')
        >>> format_amount(0.00001)
        '0.00001'
    """
    return format(Decimal(repr(float(amount))).normalize(), "f")


@dataclass(frozen=True)
class ServingSize:
    """Food portion with its gram equivalent.

    Attributes:
        amount: Quantity in the original unit (must be positive)
        unit: Portion unit
        grams_equivalent: Resolved weight in grams (must be positive)

    Examples:
        >>> ServingSize.from_string("1 slice").to_grams()
        30.0

        >>> ServingSize.from_string("250ml").to_grams()
        250.0

        >>> ServingSize.grams(100).scale(1.5).to_grams()
        150.0

    Raises:
        InvalidServingSizeError: If amount or gram equivalent is not positive.
    """

    amount: float
    unit: PortionUnit
    grams_equivalent: Grams

    def __post_init__(self) -> None:
        """Validate serving size invariants."""
        if self.amount <= 0:
            raise InvalidServingSizeError("Amount must be positive")
        if self.grams_equivalent <= 0:
            raise InvalidServingSizeError("Grams equivalent must be positive")

    # ===== Factories =====

    @classmethod
    def from_string(cls, text: str) -> "ServingSize":
        """Parse a portion description.

        The first number in the string is the amount (a decimal comma is
        accepted); the unit is resolved by PortionUnit.from_string.

        Args:
            text: Portion text such as "100g", "1 slice", "250ml", "1,5 l"

        Returns:
            Parsed ServingSize

        Raises:
            InvalidServingSizeError: If text is empty, has no number,
                a non-positive amount or an unknown unit
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidServingSizeError("Input must be a non-empty string")

        normalized = text.lower().strip()

        match = _NUMBER_PATTERN.search(normalized)
        if match is None:
            raise InvalidServingSizeError(f"No numeric value found in: {text}")

        amount = float(match.group(1).replace(",", "."))
        if amount <= 0:
            raise InvalidServingSizeError(f"Invalid amount: {format_amount(amount)}")

        try:
            unit = PortionUnit.from_string(normalized)
        except InvalidPortionUnitError as e:
            raise InvalidServingSizeError(f"Unknown unit in: {text}") from e

        return cls.of(amount, unit)

    @classmethod
    def of(cls, amount: float, unit: PortionUnit) -> "ServingSize":
        """Create from amount and unit using the standard conversion table."""
        if amount <= 0:
            raise InvalidServingSizeError("Amount must be positive")
        return cls(
            amount=float(amount),
            unit=unit,
            grams_equivalent=Grams(float(amount) * GRAMS_PER_UNIT[unit]),
        )

    @classmethod
    def grams(cls, amount: float) -> "ServingSize":
        if amount <= 0:
            raise InvalidServingSizeError("Grams must be positive")
        return cls(amount=float(amount), unit=PortionUnit.GRAMS, grams_equivalent=Grams(float(amount)))

    @classmethod
    def pieces(cls, amount: float, estimated_grams_per: float) -> "ServingSize":
        """Pieces with a food-specific weight per piece."""
        if amount <= 0 or estimated_grams_per <= 0:
            raise InvalidServingSizeError("Amount and grams per piece must be positive")
        return cls(
            amount=float(amount),
            unit=PortionUnit.PIECE,
            grams_equivalent=Grams(amount * estimated_grams_per),
        )

    @classmethod
    def slices(cls, amount: float, estimated_grams_per: float) -> "ServingSize":
        """Slices with a food-specific weight per slice."""
        if amount <= 0 or estimated_grams_per <= 0:
            raise InvalidServingSizeError("Amount and grams per slice must be positive")
        return cls(
            amount=float(amount),
            unit=PortionUnit.SLICE,
            grams_equivalent=Grams(amount * estimated_grams_per),
        )

    # ===== Queries =====

    def to_grams(self) -> Grams:
        return self.grams_equivalent

    @property
    def is_per_product(self) -> bool:
        """Whether the portion reads as whole products rather than a weight."""
        return self.unit.requires_contextual_conversion()

    def to_display_string(self, locale: str = "fr") -> str:
        """Localized portion text, re-parseable by from_string.

        Example:
            >>> ServingSize.from_string("2 slices").to_display_string("fr")
            '2 tranches'
        """
        name = self.unit.display_name(locale) if self.amount == 1 else self.unit.plural_name(locale)
        return f"{format_amount(self.amount)} {name}"

    def quantity_text(self, selected_grams: float, locale: str = "fr") -> str:
        """Describe a gram amount in terms of this portion.

        Contextual units are expressed as an estimated count of units
        ("for 2 slices"); weight and volume units as grams ("for 150g").
        """
        prefix = "pour" if locale == "fr" else "for"

        if self.is_per_product:
            estimated_units = round_half_up(selected_grams / self.grams_equivalent * self.amount)
            name = (
                self.unit.display_name(locale)
                if estimated_units == 1
                else self.unit.plural_name(locale)
            )
            return f"{prefix} {estimated_units} {name}"

        return f"{prefix} {format_amount(selected_grams)}g"

    # ===== Transformations =====

    def with_amount(self, new_amount: float) -> "ServingSize":
        """Same unit, new amount; gram equivalent rescaled proportionally."""
        if new_amount <= 0:
            raise InvalidServingSizeError("New amount must be positive")
        grams_per_unit = self.grams_equivalent / self.amount
        return ServingSize(
            amount=float(new_amount),
            unit=self.unit,
            grams_equivalent=Grams(grams_per_unit * new_amount),
        )

    def scale(self, factor: float) -> "ServingSize":
        if factor <= 0:
            raise InvalidServingSizeError("Scale factor must be positive")
        return self.with_amount(self.amount * factor)

    def __str__(self) -> str:
        return f"{format_amount(self.amount)}{self.unit.value}"
