"""Ports for the physiology domain."""

from .activity_catalog import ActivityCatalog, CatalogCapability

__all__ = ["ActivityCatalog", "CatalogCapability"]
