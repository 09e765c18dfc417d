"""Ports for the nutrition domain."""

from .dish_repository import IDishRepository

__all__ = ["IDishRepository"]
