"""Value objects for the effort domain."""

from .effort_item import EffortDescription, EffortItem
from .effort_request import EffortRequest

__all__ = ["EffortDescription", "EffortItem", "EffortRequest"]
