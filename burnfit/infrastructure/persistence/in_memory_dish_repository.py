"""In-memory implementation of IDishRepository."""

from typing import Dict, Iterable, List, Optional

from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.ports.dish_repository import IDishRepository


class InMemoryDishRepository(IDishRepository):
    """
    Dict-backed dish repository.

    Dishes are immutable, so they are stored and returned as-is.
    Insertion order doubles as popularity order.
    """

    def __init__(self, dishes: Optional[Iterable[Dish]] = None) -> None:
        self._dishes: Dict[str, Dish] = {}
        for dish in dishes or ():
            self.add(dish)

    def add(self, dish: Dish) -> None:
        """Add or replace a dish."""
        self._dishes[str(dish.dish_id)] = dish

    async def find_by_id(self, dish_id: str) -> Optional[Dish]:
        return self._dishes.get(str(dish_id))

    async def find_by_name(self, query: str, limit: int = 20) -> List[Dish]:
        needle = (query or "").strip().lower()
        if not needle:
            return []
        matches = [dish for dish in self._dishes.values() if needle in dish.name.lower()]
        return matches[:limit]

    async def find_popular(self, limit: int = 10) -> List[Dish]:
        return list(self._dishes.values())[:limit]

    async def get_all(self) -> List[Dish]:
        return list(self._dishes.values())

    def clear(self) -> None:
        """Remove all dishes (test helper)."""
        self._dishes.clear()
