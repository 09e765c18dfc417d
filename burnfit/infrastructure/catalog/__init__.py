"""Activity catalog adapters."""

from .activity_data import ACTIVITY_RECORDS, ActivityRecord
from .static_activity_catalog import StaticActivityCatalog

__all__ = ["ACTIVITY_RECORDS", "ActivityRecord", "StaticActivityCatalog"]
