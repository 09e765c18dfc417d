"""Persistence adapters."""

from .in_memory_dish_repository import InMemoryDishRepository

__all__ = ["InMemoryDishRepository"]
