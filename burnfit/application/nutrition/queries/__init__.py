"""Portion queries."""

from .calculate_portion import CalculatePortionQuery, CalculatePortionQueryHandler
from .suggest_portions import SuggestPortionsQuery, SuggestPortionsQueryHandler

__all__ = [
    "CalculatePortionQuery",
    "CalculatePortionQueryHandler",
    "SuggestPortionsQuery",
    "SuggestPortionsQueryHandler",
]
