"""Dish repository port.

Dish lookups may hit storage or the network, so the port is async.
Resolution happens before an effort request is built; the effort core
itself never awaits.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.dish import Dish


class IDishRepository(ABC):
    """Port for accessing dishes."""

    @abstractmethod
    async def find_by_id(self, dish_id: str) -> Optional[Dish]:
        """Find a dish by identifier.

        Args:
            dish_id: Dish identifier

        Returns:
            Dish or None if not found
        """

    @abstractmethod
    async def find_by_name(self, query: str, limit: int = 20) -> List[Dish]:
        """Find dishes whose name contains the query (case-insensitive).

        Args:
            query: Name fragment
            limit: Maximum number of dishes to return
        """

    @abstractmethod
    async def find_popular(self, limit: int = 10) -> List[Dish]:
        """Dishes to suggest before any search."""

    @abstractmethod
    async def get_all(self) -> List[Dish]:
        """Every dish in the repository."""
