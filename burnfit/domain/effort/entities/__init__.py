"""Aggregates for the effort domain."""

from .effort_breakdown import (
    BreakdownSummary,
    ComparativeBreakdown,
    EffortBreakdown,
    PolicyComparison,
)

__all__ = [
    "BreakdownSummary",
    "ComparativeBreakdown",
    "EffortBreakdown",
    "PolicyComparison",
]
