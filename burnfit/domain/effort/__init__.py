"""Effort domain: converting dish calories into activity time."""

from .entities import BreakdownSummary, ComparativeBreakdown, EffortBreakdown, PolicyComparison
from .policies import (
    ConservativeEffortPolicy,
    EffortPolicy,
    EffortPolicyFactory,
    ExperienceLevel,
    StandardMETEffortPolicy,
)
from .services import EffortCalculator
from .value_objects import EffortDescription, EffortItem, EffortRequest

__all__ = [
    "BreakdownSummary",
    "ComparativeBreakdown",
    "ConservativeEffortPolicy",
    "EffortBreakdown",
    "EffortCalculator",
    "EffortDescription",
    "EffortItem",
    "EffortPolicy",
    "EffortPolicyFactory",
    "EffortRequest",
    "ExperienceLevel",
    "PolicyComparison",
    "StandardMETEffortPolicy",
]
