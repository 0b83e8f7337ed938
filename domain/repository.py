import asyncio
import itertools
import logging

from domain.models import CityId, Recipe


logger = logging.getLogger(__name__)


class RecipeNotFound(Exception):
    pass


class RecipeRepository:
    """In-memory recipes, keyed by city.

    Each city holds its recipes in insertion order. A city with no entry is
    the same as a city with no recipes. Every operation runs under one lock
    so concurrent requests never lose an update or see a half-applied one.
    """

    def __init__(self) -> None:
        self._recipes: dict[CityId, list[Recipe]] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return sum(len(recipes) for recipes in self._recipes.values())

    def count(self, city_id: CityId) -> int:
        return len(self._recipes.get(city_id, ()))

    async def list(self, city_id: CityId) -> tuple[Recipe, ...]:
        async with self._lock:
            return tuple(self._recipes.get(city_id, ()))

    async def add(self, city_id: CityId, content: str) -> Recipe:
        async with self._lock:
            recipe = Recipe(id=next(self._ids), content=content)
            self._recipes.setdefault(city_id, []).append(recipe)
        logger.info("Added recipe %s for city %s", recipe.id, city_id)
        return recipe

    async def remove(self, city_id: CityId, recipe_id: int) -> None:
        async with self._lock:
            recipes = self._recipes.get(city_id)
            if not recipes:
                raise RecipeNotFound("No recipes found for this city")
            for i, recipe in enumerate(recipes):
                if recipe.id == recipe_id:
                    del recipes[i]
                    break
            else:
                raise RecipeNotFound("Recipe not found")
        logger.info("Removed recipe %s for city %s", recipe_id, city_id)
