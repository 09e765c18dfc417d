"""Bundled activity records.

MET values follow the Compendium of Physical Activities (adult values,
rounded to one decimal).
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ActivityRecord:
    """Raw catalog row; names are keyed by locale."""

    key: str
    names: Dict[str, str]
    met: float
    category: str

    def name(self, locale: str) -> str:
        return self.names.get(locale) or self.names["en"]


def _record(key: str, fr: str, en: str, met: float, category: str) -> ActivityRecord:
    return ActivityRecord(key=key, names={"fr": fr, "en": en}, met=met, category=category)


ACTIVITY_RECORDS: Tuple[ActivityRecord, ...] = (
    # Walking
    _record("walking_slow", "Marche lente", "Slow walking", 2.8, "walking"),
    _record("walking_casual", "Marche", "Casual walking", 3.0, "walking"),
    _record("walking_brisk", "Marche rapide", "Brisk walking", 3.5, "walking"),
    _record("hiking", "Randonnée", "Hiking", 6.0, "walking"),
    # Running
    _record("jogging_general", "Jogging", "Jogging", 7.0, "running"),
    _record("running_10kmh", "Course à pied (10 km/h)", "Running (10 km/h)", 9.8, "running"),
    _record("running_12kmh", "Course à pied (12 km/h)", "Running (12 km/h)", 11.8, "running"),
    # Cycling
    _record("cycling_leisure", "Vélo loisir", "Leisure cycling", 4.0, "cycling"),
    _record("cycling_moderate", "Vélo modéré", "Moderate cycling", 6.8, "cycling"),
    _record("cycling_vigorous", "Vélo intense", "Vigorous cycling", 10.0, "cycling"),
    # Swimming
    _record("swimming_leisurely", "Natation loisir", "Leisure swimming", 6.0, "swimming"),
    _record("swimming_laps_vigorous", "Natation sportive", "Vigorous lap swimming", 9.8, "swimming"),
    # Strength
    _record("weight_training_general", "Musculation", "Weight training", 3.5, "strength"),
    _record("weight_training_vigorous", "Musculation intense", "Vigorous weight training", 6.0, "strength"),
    # Flexibility
    _record("yoga_hatha", "Yoga hatha", "Hatha yoga", 2.5, "flexibility"),
    _record("stretching", "Étirements", "Stretching", 2.3, "flexibility"),
    # Dance
    _record("dancing_general", "Danse", "Dancing", 4.5, "dance"),
    _record("dance_aerobic", "Danse aérobic", "Aerobic dance", 7.3, "dance"),
    # Everyday
    _record("housework_light", "Ménage léger", "Light housework", 2.5, "daily"),
    _record("gardening", "Jardinage", "Gardening", 3.8, "daily"),
    _record("stair_climbing", "Montée d'escaliers", "Stair climbing", 8.8, "daily"),
    # Cardio
    _record("jump_rope", "Corde à sauter", "Jump rope", 12.3, "cardio"),
)
