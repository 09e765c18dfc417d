"""Explicit wiring of ports to adapters.

Settings select the implementations; nothing is cached globally, so each
call builds fresh instances.

Usage:
    from burnfit.infrastructure.config import load_settings
    from burnfit.infrastructure.factory import create_effort_calculator

    calculator = create_effort_calculator(load_settings())
"""

from typing import Optional

from burnfit.domain.effort.policies.effort_policy import EffortPolicy, EffortPolicyFactory
from burnfit.domain.effort.services.effort_calculator import EffortCalculator
from burnfit.domain.nutrition.services.quantity_converter import QuantityConverter
from burnfit.domain.physiology.ports.activity_catalog import ActivityCatalog

from .catalog.static_activity_catalog import StaticActivityCatalog
from .config import Settings, load_settings


def create_activity_catalog(settings: Optional[Settings] = None) -> ActivityCatalog:
    """Create the activity catalog named by BURNFIT_CATALOG_BACKEND.

    Raises:
        ValueError: If the backend is unknown
    """
    settings = settings or load_settings()

    if settings.catalog_backend == "static":
        return StaticActivityCatalog(locale=settings.locale)

    raise ValueError(f"Unknown catalog backend: {settings.catalog_backend}")


def create_effort_policy(settings: Optional[Settings] = None) -> EffortPolicy:
    return EffortPolicyFactory.from_settings(settings or load_settings())


def create_effort_calculator(settings: Optional[Settings] = None) -> EffortCalculator:
    settings = settings or load_settings()
    return EffortCalculator(
        activity_catalog=create_activity_catalog(settings),
        effort_policy=create_effort_policy(settings),
    )


def create_quantity_converter(settings: Optional[Settings] = None) -> QuantityConverter:
    settings = settings or load_settings()
    return QuantityConverter(locale=settings.locale)
