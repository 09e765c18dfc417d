"""Activity catalog port - read-only access to physical activities.

Every method a consumer may call is declared here. Catalogs that cannot
serve a query keep the documented empty behaviour and advertise what they
do support through ``capabilities()``, so consumers degrade by contract.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, List, Optional

from ..entities.activity import Activity
from ..value_objects.activity_intensity import ActivityIntensity


class CatalogCapability(str, Enum):
    """Optional queries an activity catalog may support."""

    FULL_LISTING = "full_listing"  # get_all returns more than defaults
    INTENSITY_INDEX = "intensity_index"  # get_by_intensity
    MET_RANGE = "met_range"  # get_by_met_range
    SEARCH = "search"  # search


class ActivityCatalog(ABC):
    """Port for resolving activities.

    Minimal implementations only provide ``get_by_key`` and
    ``list_defaults``. With a minimal catalog:
    - alternatives are drawn from defaults only
    - quick, endurance and comparative recommendations are not applicable
    """

    @abstractmethod
    def get_by_key(self, key: str) -> Optional[Activity]:
        """Resolve an activity by key.

        Args:
            key: Activity key

        Returns:
            Activity or None if unknown
        """

    @abstractmethod
    def list_defaults(self) -> List[Activity]:
        """Popular activities, in recommendation order.

        Returns:
            Default activities (non-empty in practice)
        """

    def capabilities(self) -> FrozenSet[CatalogCapability]:
        """Optional queries this catalog supports."""
        return frozenset()

    def supports(self, capability: CatalogCapability) -> bool:
        return capability in self.capabilities()

    def get_all(self) -> List[Activity]:
        """Every activity in the catalog.

        Without FULL_LISTING this is the default list.
        """
        return self.list_defaults()

    def get_by_intensity(self, intensity: ActivityIntensity) -> List[Activity]:
        """Activities in an intensity band. Empty without INTENSITY_INDEX."""
        return []

    def get_by_met_range(self, min_met: float, max_met: float) -> List[Activity]:
        """Activities with min_met <= MET <= max_met. Empty without MET_RANGE."""
        return []

    def search(self, query: str) -> List[Activity]:
        """Activities matching a free-text query. Empty without SEARCH."""
        return []
