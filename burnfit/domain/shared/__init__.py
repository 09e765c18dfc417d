"""Shared domain primitives: units and exceptions."""

from .errors import (
    DishNotFoundError,
    DomainError,
    EffortCalculationError,
    InvalidActivityError,
    InvalidDishError,
    InvalidEffortInputError,
    InvalidEffortItemError,
    InvalidEffortRequestError,
    InvalidMetError,
    InvalidPortionUnitError,
    InvalidServingSizeError,
    InvalidUserHealthInfoError,
    NoSuitableActivityError,
    NotFoundError,
    QuantityError,
    ValidationError,
)
from .units import Centimeters, Grams, Kilocalories, Kilograms, Minutes, round_half_up

__all__ = [
    "Centimeters",
    "Grams",
    "Kilocalories",
    "Kilograms",
    "Minutes",
    "round_half_up",
    "DomainError",
    "ValidationError",
    "InvalidMetError",
    "InvalidActivityError",
    "InvalidEffortItemError",
    "InvalidEffortInputError",
    "InvalidEffortRequestError",
    "InvalidUserHealthInfoError",
    "InvalidDishError",
    "QuantityError",
    "InvalidPortionUnitError",
    "InvalidServingSizeError",
    "EffortCalculationError",
    "NoSuitableActivityError",
    "NotFoundError",
    "DishNotFoundError",
]
