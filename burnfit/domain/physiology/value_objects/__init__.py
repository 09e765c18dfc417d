"""Value objects for the physiology domain."""

from .activity_intensity import ActivityIntensity
from .met import MAX_MET, Met
from .user_health_info_id import PRIMARY_USER_ID, UserHealthInfoId

__all__ = [
    "ActivityIntensity",
    "Met",
    "MAX_MET",
    "UserHealthInfoId",
    "PRIMARY_USER_ID",
]
