"""In-memory ActivityCatalog over the bundled activity records.

Supports every optional catalog query. Labels are rendered in the
configured locale.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence

from burnfit.domain.physiology.entities.activity import Activity
from burnfit.domain.physiology.entities.user_health_info import DEFAULT_ACTIVITY_KEYS
from burnfit.domain.physiology.ports.activity_catalog import ActivityCatalog, CatalogCapability
from burnfit.domain.physiology.value_objects.activity_intensity import ActivityIntensity
from burnfit.domain.physiology.value_objects.met import Met

from .activity_data import ACTIVITY_RECORDS, ActivityRecord

SIMILAR_MET_TOLERANCE = 1.0


class StaticActivityCatalog(ActivityCatalog):
    """Activity catalog backed by a fixed list of records.

    Args:
        locale: Label locale ("fr" or "en"; unknown locales use English)
        records: Records to serve (bundled records by default)
        default_keys: Keys returned by list_defaults, in order

    Example:
        >>> catalog = StaticActivityCatalog(locale="en")
        >>> catalog.get_by_key("walking_brisk").label
        'Brisk walking'
    """

    def __init__(
        self,
        locale: str = "fr",
        records: Optional[Iterable[ActivityRecord]] = None,
        default_keys: Sequence[str] = DEFAULT_ACTIVITY_KEYS,
    ) -> None:
        self.locale = locale
        self._records: Dict[str, ActivityRecord] = {}
        self._activities: Dict[str, Activity] = {}

        for record in ACTIVITY_RECORDS if records is None else records:
            self._records[record.key] = record
            self._activities[record.key] = Activity.define(
                record.key, record.name(locale), Met.of(record.met)
            )

        self._default_keys = [key for key in default_keys if key in self._activities]

    def capabilities(self) -> FrozenSet[CatalogCapability]:
        return frozenset(CatalogCapability)

    # ===== Required queries =====

    def get_by_key(self, key: str) -> Optional[Activity]:
        return self._activities.get(key)

    def list_defaults(self) -> List[Activity]:
        return [self._activities[key] for key in self._default_keys]

    # ===== Optional queries =====

    def get_all(self) -> List[Activity]:
        return list(self._activities.values())

    def get_by_intensity(self, intensity: ActivityIntensity) -> List[Activity]:
        return [a for a in self._activities.values() if a.intensity is intensity]

    def get_by_met_range(self, min_met: float, max_met: float) -> List[Activity]:
        return [a for a in self._activities.values() if min_met <= a.met.value <= max_met]

    def search(self, query: str) -> List[Activity]:
        """Case-insensitive match on key and localized names."""
        needle = (query or "").strip().lower()
        if not needle:
            return []
        return [
            self._activities[record.key]
            for record in self._records.values()
            if needle in record.key.lower()
            or any(needle in name.lower() for name in record.names.values())
        ]

    # ===== Catalog extras =====

    def get_by_category(self, category: str) -> List[Activity]:
        return [
            self._activities[record.key]
            for record in self._records.values()
            if record.category == category
        ]

    def available_categories(self) -> List[str]:
        """Categories in catalog order, without duplicates."""
        return list(dict.fromkeys(record.category for record in self._records.values()))

    def similar_activities(self, key: str) -> List[Activity]:
        """Same category, MET within 1.0 of the given activity."""
        reference = self._records.get(key)
        if reference is None:
            return []
        return [
            self._activities[record.key]
            for record in self._records.values()
            if record.key != key
            and record.category == reference.category
            and abs(record.met - reference.met) <= SIMILAR_MET_TOLERANCE
        ]
