"""Tests for portion application queries."""

import pytest

from burnfit.application.nutrition.queries.calculate_portion import (
    CalculatePortionQuery,
    CalculatePortionQueryHandler,
)
from burnfit.application.nutrition.queries.suggest_portions import (
    SuggestPortionsQuery,
    SuggestPortionsQueryHandler,
)
from burnfit.domain.nutrition.services.quantity_converter import QuantityConverter
from burnfit.domain.shared.errors import DishNotFoundError, InvalidServingSizeError
from burnfit.infrastructure.persistence.in_memory_dish_repository import InMemoryDishRepository


@pytest.fixture
def repository(dish_factory):
    """Bread at 250 kcal per 100g."""
    return InMemoryDishRepository([dish_factory("bread", "Bread", 250)])


@pytest.fixture
def handler(repository):
    return CalculatePortionQueryHandler(QuantityConverter(locale="fr"), repository)


@pytest.mark.asyncio
async def test_calculate_portion(handler):
    """Test two slices of bread."""
    result = await handler.handle(
        CalculatePortionQuery(selected_grams=60, serving_text="1 slice", dish_id="bread")
    )

    assert result.actual_calories == pytest.approx(150.0)
    assert result.original_serving.grams == 30.0
    assert result.original_serving.display == "1 tranche"
    assert result.display_context.quantity_text == "pour 2 tranches"
    assert result.display_context.is_per_product
    assert result.adjusted_dish.calories == pytest.approx(150.0)
    assert result.adjusted_dish.reference_grams == 60.0
    assert result.dish.calories == 250.0


@pytest.mark.asyncio
async def test_calculate_portion_in_grams(handler):
    result = await handler.handle(CalculatePortionQuery(selected_grams=150, dish_id="bread"))

    assert result.actual_calories == pytest.approx(375.0)
    assert result.display_context.quantity_text == "pour 150g"
    assert not result.display_context.is_per_product


@pytest.mark.asyncio
@pytest.mark.parametrize("grams", [0, -10, 5001])
async def test_selected_grams_out_of_range(handler, grams):
    with pytest.raises(InvalidServingSizeError):
        await handler.handle(CalculatePortionQuery(selected_grams=grams, dish_id="bread"))


@pytest.mark.asyncio
async def test_upper_bound_accepted(handler):
    result = await handler.handle(CalculatePortionQuery(selected_grams=5000, dish_id="bread"))

    assert result.selected_grams == 5000


@pytest.mark.asyncio
async def test_unknown_dish(handler):
    with pytest.raises(DishNotFoundError):
        await handler.handle(CalculatePortionQuery(selected_grams=100, dish_id="cake"))


@pytest.mark.asyncio
async def test_suggest_portions():
    handler = SuggestPortionsQueryHandler(QuantityConverter(locale="en"))

    suggestions = await handler.handle(SuggestPortionsQuery(serving_text="1 slice"))

    assert [s.grams for s in suggestions] == [30.0, 15.0, 45.0, 60.0, 50.0, 100.0, 200.0]
    assert suggestions[0].display == "1 slice"
    assert suggestions[0].is_per_product
