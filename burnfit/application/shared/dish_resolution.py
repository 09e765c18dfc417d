"""Resolve the dish a query refers to."""

from typing import Optional

from burnfit.domain.nutrition.entities.dish import Dish
from burnfit.domain.nutrition.ports.dish_repository import IDishRepository
from burnfit.domain.shared.errors import DishNotFoundError, InvalidEffortRequestError


async def resolve_dish(
    repository: IDishRepository,
    dish_id: Optional[str] = None,
    dish: Optional[Dish] = None,
) -> Dish:
    """Return the given dish, or look it up by id.

    Raises:
        InvalidEffortRequestError: If neither dish nor dish_id is given
        DishNotFoundError: If dish_id matches no dish
    """
    if dish is not None:
        return dish
    if not dish_id:
        raise InvalidEffortRequestError("Either dish or dish_id is required")

    found = await repository.find_by_id(dish_id)
    if found is None:
        raise DishNotFoundError(dish_id)
    return found
