"""Physiology domain: activities, MET values and user health profiles."""

from .entities import DEFAULT_ACTIVITY_KEYS, Activity, Sex, UserHealthInfo
from .ports import ActivityCatalog, CatalogCapability
from .value_objects import ActivityIntensity, Met, UserHealthInfoId

__all__ = [
    "Activity",
    "ActivityCatalog",
    "ActivityIntensity",
    "CatalogCapability",
    "DEFAULT_ACTIVITY_KEYS",
    "Met",
    "Sex",
    "UserHealthInfo",
    "UserHealthInfoId",
]
