"""QuantityConverter - portion normalization domain service.

Stateless operations over ServingSize:
* Parse free-text portions, falling back to 100g when unparseable
* Build display contexts ("for 2 slices" / "for 150g")
* Suggest alternative portions and validate portion sanity bounds

Falling back to 100g is the only silent recovery in the domain; it is
always logged.
"""

from dataclasses import dataclass
from typing import Dict, List, Union

import structlog

from burnfit.domain.shared.errors import InvalidServingSizeError, QuantityError
from burnfit.domain.shared.units import Grams

from ..value_objects.portion_unit import PortionUnit
from ..value_objects.serving_size import ServingSize, format_amount

logger = structlog.get_logger(__name__)

DEFAULT_FALLBACK_GRAMS = 100.0

MIN_VALID_GRAMS = 1.0
MAX_VALID_GRAMS = 5000.0

# Upper bound on amount, in the original unit
MAX_UNIT_AMOUNTS: Dict[PortionUnit, float] = {
    PortionUnit.PIECE: 50,
    PortionUnit.SLICE: 20,
    PortionUnit.BOTTLE: 10,
}

SUGGESTED_SCALE_FACTORS = (0.5, 1.5, 2.0)
SUGGESTED_GRAM_AMOUNTS = (50.0, 100.0, 200.0)

# Unit spellings found in food datasets, mapped to parseable tokens
_UNIT_ALIASES: Dict[str, str] = {
    "100g": "g",
    "g": "g",
    "gr": "g",
    "kg": "kg",
    "piece": "piece",
    "pc": "piece",
    "slice": "slice",
    "cup": "cup",
    "serving": "serving",
    "bottle": "bottle",
    "can": "can",
    "ml": "ml",
    "cl": "ml",
    "l": "l",
}


@dataclass(frozen=True)
class DisplayContext:
    """Rendering hint for a selected quantity.

    Attributes:
        quantity_text: e.g. "pour 2 tranches" or "pour 150g"
        is_per_product: True when the quantity reads as whole products
        serving_description: Display string of the reference serving
    """

    quantity_text: str
    is_per_product: bool
    serving_description: str


class QuantityConverter:
    """Normalize portion descriptions to grams.

    Args:
        locale: Locale for display strings ("fr" or "en")

    Example:
        >>> converter = QuantityConverter(locale="en")
        >>> serving = converter.parse_serving_string("1 slice")
        >>> converter.generate_display_context(serving, Grams(60)).quantity_text
        'for 2 slices'
    """

    def __init__(self, locale: str = "fr") -> None:
        self.locale = locale

    def parse_serving_string(self, text: str) -> ServingSize:
        """Parse a serving string, defaulting to 100g when unparseable.

        Args:
            text: Portion text, e.g. "1 slice"

        Returns:
            Parsed ServingSize, or 100g if the text could not be parsed

        Raises:
            InvalidServingSizeError: If text is empty or not a string
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidServingSizeError("Serving string cannot be empty")

        try:
            return ServingSize.from_string(text)
        except QuantityError as e:
            logger.warning(
                "serving_parse_fallback",
                raw=text,
                fallback_grams=DEFAULT_FALLBACK_GRAMS,
                error=str(e),
            )
            return ServingSize.grams(DEFAULT_FALLBACK_GRAMS)

    def convert_to_grams(self, amount: float, unit: Union[PortionUnit, str]) -> Grams:
        """Convert an amount of a unit to grams.

        String units are resolved like portion text ("slices", "tbsp").

        Raises:
            InvalidServingSizeError: If amount is not positive
            InvalidPortionUnitError: If a string unit is not recognized
        """
        if amount <= 0:
            raise InvalidServingSizeError("Amount must be positive")
        if not isinstance(unit, PortionUnit):
            unit = PortionUnit.from_string(unit)
        return ServingSize.of(amount, unit).to_grams()

    def extract_serving_size(self, amount: float, unit: str) -> ServingSize:
        """Build a ServingSize from a dataset portion record.

        Dataset units ("100g", "pc", "cl", ...) are mapped to parseable
        tokens first. Unusable records fall back to 100g.

        Args:
            amount: Portion amount as stored in the dataset
            unit: Portion unit as stored in the dataset
        """
        token = _UNIT_ALIASES.get(unit.lower().strip(), unit)
        # Centiliters are stored as ml tokens, so scale the amount
        if unit.lower().strip() == "cl":
            amount = amount * 10
        try:
            return ServingSize.from_string(f"{format_amount(amount)} {token}")
        except QuantityError as e:
            logger.warning(
                "serving_extract_fallback",
                amount=amount,
                unit=unit,
                fallback_grams=DEFAULT_FALLBACK_GRAMS,
                error=str(e),
            )
            return ServingSize.grams(DEFAULT_FALLBACK_GRAMS)

    def generate_display_context(
        self, serving_size: ServingSize, selected_grams: Grams
    ) -> DisplayContext:
        return DisplayContext(
            quantity_text=serving_size.quantity_text(selected_grams, self.locale),
            is_per_product=serving_size.is_per_product,
            serving_description=serving_size.to_display_string(self.locale),
        )

    def calculate_portion_ratio(self, original: ServingSize, new_grams: Grams) -> float:
        """Ratio of a new gram amount to the original serving.

        Example:
            >>> QuantityConverter().calculate_portion_ratio(ServingSize.grams(100), Grams(250))
            2.5
        """
        original_grams = original.to_grams()
        if original_grams == 0:
            return 1.0
        return new_grams / original_grams

    def validate_serving_size(self, serving_size: ServingSize) -> bool:
        """Check a portion is plausible.

        Rules:
        - 1g <= grams <= 5000g
        - at most 50 pieces, 20 slices, 10 bottles
        """
        grams = serving_size.to_grams()
        if grams < MIN_VALID_GRAMS or grams > MAX_VALID_GRAMS:
            return False

        max_amount = MAX_UNIT_AMOUNTS.get(serving_size.unit)
        if max_amount is not None and serving_size.amount > max_amount:
            return False

        return True

    def get_suggested_servings(self, base_serving: ServingSize) -> List[ServingSize]:
        """Common portion options around a base serving.

        Returns the base, half, 1.5x and double portions, plus 50/100/200g
        when the base is not weight-based; implausible entries are dropped.
        """
        suggestions = [base_serving]
        suggestions.extend(base_serving.scale(factor) for factor in SUGGESTED_SCALE_FACTORS)

        if not base_serving.unit.is_weight_based():
            suggestions.extend(ServingSize.grams(grams) for grams in SUGGESTED_GRAM_AMOUNTS)

        return [s for s in suggestions if self.validate_serving_size(s)]

    def compare_servings(self, first: ServingSize, second: ServingSize) -> float:
        """Compare by gram equivalent: negative, zero or positive."""
        return first.to_grams() - second.to_grams()

    def format_for_logging(self, serving_size: ServingSize) -> str:
        return (
            f"{format_amount(serving_size.amount)} {serving_size.unit.value} "
            f"({format_amount(serving_size.to_grams())}g)"
        )
