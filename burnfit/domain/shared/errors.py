"""
Domain exceptions.

Typed exceptions for explicit error handling.
Every exception carries a stable ``code`` for callers mapping errors
to user-facing messages.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    code = "DOMAIN_ERROR"


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError, ValueError):
    """
    Input validation failed at construction.

    Raised when:
    - Empty key or label
    - Non-positive MET, calories, weight or amount
    - Out of range biometric values

    Never recovered silently: the offending object is not created.

    Example:
        >>> raise ValidationError("Activity key cannot be empty")
    """

    code = "VALIDATION_ERROR"


class InvalidMetError(ValidationError):
    """MET value outside (0, 25]."""

    code = "INVALID_MET"


class InvalidActivityError(ValidationError):
    """Activity key or label is blank."""

    code = "INVALID_ACTIVITY"


class InvalidEffortItemError(ValidationError):
    """Effort item with blank key/label, minutes < 1 or MET <= 0."""

    code = "INVALID_EFFORT_ITEM"


class InvalidEffortInputError(ValidationError):
    """
    Non-positive calories, weight, MET or duration given to an effort policy.

    Example:
        >>> raise InvalidEffortInputError("Calories must be positive")
    """

    code = "INVALID_EFFORT_INPUT"


class InvalidEffortRequestError(ValidationError):
    """Effort request without dish or user."""

    code = "INVALID_EFFORT_REQUEST"


class InvalidUserHealthInfoError(ValidationError):
    """
    User health profile failed validation.

    Raised when:
    - Weight outside 30-300 kg
    - Height outside 120-250 cm
    - Malformed profile id
    """

    code = "INVALID_USER_HEALTH_INFO"


class InvalidDishError(ValidationError):
    """Dish with blank id/name or non-positive calories."""

    code = "INVALID_DISH"


# ═══════════════════════════════════════════════════════════
# QUANTITY EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class QuantityError(ValidationError):
    """Base exception for portion and serving size errors."""

    code = "QUANTITY_ERROR"


class InvalidPortionUnitError(QuantityError):
    """
    Portion unit token not recognized.

    Example:
        >>> raise InvalidPortionUnitError("handful")
    """

    code = "INVALID_PORTION_UNIT"

    def __init__(self, unit: str):
        super().__init__(f"Invalid portion unit: {unit}")
        self.unit = unit


class InvalidServingSizeError(QuantityError):
    """
    Serving size could not be built.

    Raised when:
    - Input string is empty or carries no number
    - Amount or gram equivalent is not positive
    - Unit token is unknown

    Example:
        >>> raise InvalidServingSizeError("Amount must be positive")
    """

    code = "INVALID_SERVING_SIZE"

    def __init__(self, message: str):
        super().__init__(f"Invalid serving size: {message}")


# ═══════════════════════════════════════════════════════════
# EFFORT CALCULATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class EffortCalculationError(DomainError):
    """Base exception for effort calculation failures."""

    code = "EFFORT_CALCULATION_ERROR"


class NoSuitableActivityError(EffortCalculationError):
    """
    No activity could be resolved at any selection tier.

    Raised when preferred keys, the primary key and catalog defaults
    all fail to resolve. There is no further fallback.
    """

    code = "NO_SUITABLE_ACTIVITY"

    def __init__(self, message: str = "No suitable activity found for effort calculation"):
        super().__init__(message)


# ═══════════════════════════════════════════════════════════
# LOOKUP EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class NotFoundError(DomainError):
    """
    Resource not found.

    Generic not found error. Prefer specific types like DishNotFoundError.
    """

    code = "NOT_FOUND"


class DishNotFoundError(NotFoundError):
    """Raised when a dish cannot be found by its identifier."""

    code = "DISH_NOT_FOUND"

    def __init__(self, dish_id: str):
        super().__init__(f"Dish not found: {dish_id}")
        self.dish_id = dish_id
