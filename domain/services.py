from typing import Any

from domain.city_api import CityApi
from domain.models import CityId, CityInfos, Recipe, label_predictions
from domain.repository import RecipeNotFound, RecipeRepository


MIN_CONTENT_LENGTH = 10
MAX_CONTENT_LENGTH = 2000


class ValidationError(Exception):
    pass


def validate_content(content: Any) -> str:
    if content is None or content == "":
        raise ValidationError("Content is required")
    if not isinstance(content, str):
        raise ValidationError("Content must be a string")
    if len(content) < MIN_CONTENT_LENGTH:
        raise ValidationError(
            f"Content is too short (minimum {MIN_CONTENT_LENGTH} characters)"
        )
    if len(content) > MAX_CONTENT_LENGTH:
        raise ValidationError(
            f"Content is too long (maximum {MAX_CONTENT_LENGTH} characters)"
        )
    return content


def parse_recipe_id(recipe_id: str | int) -> int:
    """Only a plain run of ASCII digits names a recipe."""
    if isinstance(recipe_id, int):
        return recipe_id
    if not (recipe_id.isascii() and recipe_id.isdecimal()):
        raise RecipeNotFound("Recipe not found")
    return int(recipe_id)


async def city_infos(
    city_id: CityId,
    *,
    city_api: CityApi,
    repository: RecipeRepository,
) -> CityInfos:
    """City, weather and recipes in one go.

    Any upstream failure propagates. Nothing is returned half filled.
    """
    city = await city_api.city(city_id)
    entries = await city_api.weather(city_id)
    recipes = await repository.list(city_id)
    return CityInfos(
        city=city,
        weather_predictions=label_predictions(entries),
        recipes=recipes,
    )


async def create_recipe(
    city_id: CityId,
    content: Any,
    *,
    city_api: CityApi,
    repository: RecipeRepository,
) -> Recipe:
    # The city is checked before the content.
    await city_api.city(city_id)
    content = validate_content(content)
    return await repository.add(city_id, content)


async def delete_recipe(
    city_id: CityId,
    recipe_id: str | int,
    *,
    city_api: CityApi,
    repository: RecipeRepository,
) -> None:
    await city_api.city(city_id)
    if not repository.count(city_id):
        raise RecipeNotFound("No recipes found for this city")
    await repository.remove(city_id, parse_recipe_id(recipe_id))
