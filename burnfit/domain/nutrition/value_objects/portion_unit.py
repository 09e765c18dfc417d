"""PortionUnit value object - ways a food portion can be measured."""

import re
from enum import Enum
from typing import Dict

from burnfit.domain.shared.errors import InvalidPortionUnitError

_LITER_PATTERN = re.compile(r"^\d+(?:[.,]\d+)?\s*l$")


class PortionUnit(str, Enum):
    """Portion unit kinds.

    Grouped as:
    - weight-based (exact): g, kg, per 100g
    - volume-based (1 ml ~ 1 g): ml, l, cup, tbsp, tsp
    - contextual (rough average weight): piece, slice, serving, portion,
      bottle, can
    """

    GRAMS = "g"
    KILOGRAMS = "kg"

    MILLILITERS = "ml"
    LITERS = "l"
    CUP = "cup"
    TABLESPOON = "tbsp"
    TEASPOON = "tsp"

    PIECE = "piece"
    SLICE = "slice"
    SERVING = "serving"
    PORTION = "portion"

    BOTTLE = "bottle"
    CAN = "can"

    PER_100G = "100g"

    @classmethod
    def from_string(cls, text: str) -> "PortionUnit":
        """Parse a unit token, possibly embedded in a portion string.

        Tokens are tested in a fixed order so that overlapping substrings
        resolve predictably: containers, counts, weights (kg before g),
        then volumes (ml before l, spoons before cup).

        Args:
            text: Raw unit or portion text ("250ml", "2 slices", "kg")

        Returns:
            Matching PortionUnit

        Raises:
            InvalidPortionUnitError: If no unit token is recognized

        Example:
            >>> PortionUnit.from_string("1 bottle")
            <PortionUnit.BOTTLE: 'bottle'>
            >>> PortionUnit.from_string("1.5kg")
            <PortionUnit.KILOGRAMS: 'kg'>
        """
        normalized = text.lower().strip()

        # Containers
        if "bottle" in normalized or "bouteille" in normalized:
            return cls.BOTTLE
        if "can" in normalized or "canette" in normalized:
            return cls.CAN

        # Counts
        if "slice" in normalized or "tranche" in normalized:
            return cls.SLICE
        if "piece" in normalized or "pièce" in normalized:
            return cls.PIECE
        if "serving" in normalized or "portion" in normalized:
            return cls.SERVING

        # Weights
        if "kg" in normalized or "kilo" in normalized:
            return cls.KILOGRAMS
        if "per 100g" in normalized or "pour 100g" in normalized:
            return cls.PER_100G
        if "g" in normalized:
            return cls.GRAMS

        # Volumes
        if "ml" in normalized or "millilit" in normalized:
            return cls.MILLILITERS
        if any(t in normalized for t in ("tbsp", "tablespoon", "cuillère à soupe")):
            return cls.TABLESPOON
        if any(t in normalized for t in ("tsp", "teaspoon", "cuillère à café")):
            return cls.TEASPOON
        if "cup" in normalized or "tasse" in normalized:
            return cls.CUP
        if (
            normalized == "l"
            or _LITER_PATTERN.match(normalized)
            or "liter" in normalized
            or "litre" in normalized
        ):
            return cls.LITERS

        raise InvalidPortionUnitError(text)

    def is_weight_based(self) -> bool:
        return self in _WEIGHT_UNITS

    def is_volume_based(self) -> bool:
        """Volume units, approximated as 1 ml ~ 1 g."""
        return self in _VOLUME_UNITS

    def requires_contextual_conversion(self) -> bool:
        """Count/container units whose weight depends on the food.

        "1 slice" of bread and "1 slice" of pizza weigh very differently;
        the gram equivalent of these units is an average.
        """
        return self in _CONTEXTUAL_UNITS

    @property
    def grams_per_unit(self) -> float:
        """Gram equivalent of one unit."""
        return GRAMS_PER_UNIT[self]

    def display_name(self, locale: str = "fr") -> str:
        """Localized unit name. Unknown locales fall back to English."""
        names = _DISPLAY_NAMES.get(locale, _DISPLAY_NAMES["en"])
        return names.get(self, _DISPLAY_NAMES["en"][self])

    def plural_name(self, locale: str = "fr") -> str:
        """Localized plural for count, container and cup units.

        Other units are returned unchanged (e.g. "grams" is already plural).
        """
        plurals = _PLURAL_NAMES.get(locale, _PLURAL_NAMES["en"])
        return plurals.get(self, self.display_name(locale))


_WEIGHT_UNITS = frozenset({PortionUnit.GRAMS, PortionUnit.KILOGRAMS, PortionUnit.PER_100G})

_VOLUME_UNITS = frozenset(
    {
        PortionUnit.MILLILITERS,
        PortionUnit.LITERS,
        PortionUnit.CUP,
        PortionUnit.TABLESPOON,
        PortionUnit.TEASPOON,
    }
)

_CONTEXTUAL_UNITS = frozenset(
    {
        PortionUnit.PIECE,
        PortionUnit.SLICE,
        PortionUnit.SERVING,
        PortionUnit.PORTION,
        PortionUnit.BOTTLE,
        PortionUnit.CAN,
    }
)

GRAMS_PER_UNIT: Dict[PortionUnit, float] = {
    PortionUnit.GRAMS: 1.0,
    PortionUnit.KILOGRAMS: 1000.0,
    PortionUnit.PER_100G: 100.0,
    PortionUnit.MILLILITERS: 1.0,  # 1 ml ~ 1 g
    PortionUnit.LITERS: 1000.0,
    PortionUnit.CUP: 200.0,
    PortionUnit.TABLESPOON: 15.0,
    PortionUnit.TEASPOON: 5.0,
    PortionUnit.PIECE: 20.0,
    PortionUnit.SLICE: 30.0,
    PortionUnit.SERVING: 150.0,
    PortionUnit.PORTION: 150.0,
    PortionUnit.BOTTLE: 330.0,
    PortionUnit.CAN: 250.0,
}

_DISPLAY_NAMES: Dict[str, Dict[PortionUnit, str]] = {
    "fr": {
        PortionUnit.GRAMS: "grammes",
        PortionUnit.KILOGRAMS: "kilogrammes",
        PortionUnit.MILLILITERS: "millilitres",
        PortionUnit.LITERS: "litres",
        PortionUnit.CUP: "tasse",
        PortionUnit.TABLESPOON: "cuillère à soupe",
        PortionUnit.TEASPOON: "cuillère à café",
        PortionUnit.PIECE: "pièce",
        PortionUnit.SLICE: "tranche",
        PortionUnit.SERVING: "portion",
        PortionUnit.PORTION: "portion",
        PortionUnit.BOTTLE: "bouteille",
        PortionUnit.CAN: "canette",
        PortionUnit.PER_100G: "pour 100g",
    },
    "en": {
        PortionUnit.GRAMS: "grams",
        PortionUnit.KILOGRAMS: "kilograms",
        PortionUnit.MILLILITERS: "milliliters",
        PortionUnit.LITERS: "liters",
        PortionUnit.CUP: "cup",
        PortionUnit.TABLESPOON: "tablespoon",
        PortionUnit.TEASPOON: "teaspoon",
        PortionUnit.PIECE: "piece",
        PortionUnit.SLICE: "slice",
        PortionUnit.SERVING: "serving",
        PortionUnit.PORTION: "portion",
        PortionUnit.BOTTLE: "bottle",
        PortionUnit.CAN: "can",
        PortionUnit.PER_100G: "per 100g",
    },
}

_PLURAL_NAMES: Dict[str, Dict[PortionUnit, str]] = {
    "fr": {
        PortionUnit.CUP: "tasses",
        PortionUnit.PIECE: "pièces",
        PortionUnit.SLICE: "tranches",
        PortionUnit.SERVING: "portions",
        PortionUnit.PORTION: "portions",
        PortionUnit.BOTTLE: "bouteilles",
        PortionUnit.CAN: "canettes",
    },
    "en": {
        PortionUnit.CUP: "cups",
        PortionUnit.PIECE: "pieces",
        PortionUnit.SLICE: "slices",
        PortionUnit.SERVING: "servings",
        PortionUnit.PORTION: "portions",
        PortionUnit.BOTTLE: "bottles",
        PortionUnit.CAN: "cans",
    },
}
