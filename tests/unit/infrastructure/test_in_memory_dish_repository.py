"""Tests for InMemoryDishRepository."""

import pytest

from burnfit.infrastructure.persistence.in_memory_dish_repository import InMemoryDishRepository


@pytest.fixture
def repository(dish_factory):
    return InMemoryDishRepository(
        [
            dish_factory("apple", "Apple", 52),
            dish_factory("apple_pie", "Apple pie", 237),
            dish_factory("pizza", "Pizza margherita", 266),
        ]
    )


@pytest.mark.asyncio
async def test_find_by_id(repository):
    dish = await repository.find_by_id("pizza")

    assert dish.name == "Pizza margherita"
    assert await repository.find_by_id("cake") is None


@pytest.mark.asyncio
async def test_find_by_name_is_case_insensitive(repository):
    dishes = await repository.find_by_name("APPLE")

    assert [str(d.dish_id) for d in dishes] == ["apple", "apple_pie"]


@pytest.mark.asyncio
async def test_find_by_name_limit(repository):
    assert len(await repository.find_by_name("apple", limit=1)) == 1
    assert await repository.find_by_name("   ") == []


@pytest.mark.asyncio
async def test_find_popular_keeps_insertion_order(repository):
    dishes = await repository.find_popular(limit=2)

    assert [str(d.dish_id) for d in dishes] == ["apple", "apple_pie"]


@pytest.mark.asyncio
async def test_add_replaces_same_id(repository, dish_factory):
    repository.add(dish_factory("apple", "Green apple", 50))

    dishes = await repository.get_all()
    assert len(dishes) == 3
    assert (await repository.find_by_id("apple")).name == "Green apple"


@pytest.mark.asyncio
async def test_clear(repository):
    repository.clear()

    assert await repository.get_all() == []
