"""Shared test fixtures.

Unit tests run against in-memory adapters only.
"""

from typing import Callable, Dict, List, Optional

import pytest

from burnfit.domain.effort.policies.effort_policy import StandardMETEffortPolicy
from burnfit.domain.effort.services.effort_calculator import EffortCalculator
from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.value_objects.dish_id import DishId
from burnfit.domain.nutrition.value_objects.nutritional_info import NutritionalInfo
from burnfit.domain.physiology.entities.activity import Activity
from burnfit.domain.physiology.entities.user_health_info import UserHealthInfo
from burnfit.domain.physiology.ports.activity_catalog import ActivityCatalog
from burnfit.domain.physiology.value_objects.met import Met
from burnfit.infrastructure.catalog.static_activity_catalog import StaticActivityCatalog


class MinimalActivityCatalog(ActivityCatalog):
    """Catalog implementing only the required queries."""

    def __init__(self, activities: Optional[List[Activity]] = None):
        self._defaults = list(activities or [])
        self._by_key: Dict[str, Activity] = {a.key: a for a in self._defaults}

    def get_by_key(self, key: str) -> Optional[Activity]:
        return self._by_key.get(key)

    def list_defaults(self) -> List[Activity]:
        return list(self._defaults)


def make_dish(dish_id: str = "apple", name: str = "Apple", calories: float = 95.0) -> Dish:
    """Build a dish whose calories refer to 100g."""
    return Dish.create(DishId.from_string(dish_id), name, NutritionalInfo.per_serving(calories))


def make_activity(key: str, met: float, label: Optional[str] = None) -> Activity:
    return Activity.define(key, label or key.replace("_", " ").title(), Met.of(met))


@pytest.fixture
def dish_factory() -> Callable[..., Dish]:
    return make_dish


@pytest.fixture
def average_user() -> UserHealthInfo:
    """70 kg user with the default activity preferences."""
    return UserHealthInfo.average()


@pytest.fixture
def catalog() -> StaticActivityCatalog:
    return StaticActivityCatalog(locale="en")


@pytest.fixture
def calculator(catalog) -> EffortCalculator:
    return EffortCalculator(catalog, StandardMETEffortPolicy())


@pytest.fixture
def minimal_catalog() -> MinimalActivityCatalog:
    """Defaults only: brisk walking, jogging, yoga."""
    return MinimalActivityCatalog(
        [
            make_activity("walking_brisk", 3.5),
            make_activity("jogging_general", 7.0),
            make_activity("yoga_hatha", 2.5),
        ]
    )
