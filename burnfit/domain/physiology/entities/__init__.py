"""Entities for the physiology domain."""

from .activity import Activity
from .user_health_info import DEFAULT_ACTIVITY_KEYS, Sex, UserHealthInfo

__all__ = [
    "Activity",
    "UserHealthInfo",
    "Sex",
    "DEFAULT_ACTIVITY_KEYS",
]
