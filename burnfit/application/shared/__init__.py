"""Helpers shared by application queries."""

from .dish_resolution import resolve_dish
from .models import DishOutput, UserOutput

__all__ = ["DishOutput", "UserOutput", "resolve_dish"]
