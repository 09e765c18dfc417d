"""Effort policies."""

from .effort_policy import (
    ConservativeEffortPolicy,
    EffortPolicy,
    EffortPolicyFactory,
    ExperienceLevel,
    StandardMETEffortPolicy,
)

__all__ = [
    "ConservativeEffortPolicy",
    "EffortPolicy",
    "EffortPolicyFactory",
    "ExperienceLevel",
    "StandardMETEffortPolicy",
]
