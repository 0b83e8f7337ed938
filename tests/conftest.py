from typing import Any

import httpx
import pytest

from domain.city_api import CityApi
from domain.repository import RecipeRepository


PARIS = {
    "id": "paris",
    "coordinates": {"latitude": 48.8566, "longitude": 2.3522},
    "population": 2148000,
    "knownFor": ["Eiffel Tower", "Louvre"],
}

PARIS_WEATHER = [{"min": 5, "max": 12}, {"min": 6, "max": 14}]


class Upstream:
    """Fake city and weather provider. Records every path it is asked for."""

    def __init__(self) -> None:
        self.cities: dict[str, Any] = {"paris": PARIS}
        self.weather: dict[str, Any] = {"paris": PARIS_WEATHER}
        self.weather_status = 200
        self.calls: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(request.url.raw_path.decode())
        kind, _, city_id = path.strip("/").partition("/")
        match kind:
            case "cities" if city_id in self.cities:
                return httpx.Response(200, json=self.cities[city_id])
            case "weather" if city_id in self.weather:
                return httpx.Response(
                    self.weather_status, json=self.weather[city_id]
                )
            case _:
                return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def city_api(upstream: Upstream) -> CityApi:
    return CityApi(
        httpx.AsyncClient(
            base_url="https://upstream.test",
            transport=httpx.MockTransport(upstream),
        )
    )


@pytest.fixture
def repository() -> RecipeRepository:
    return RecipeRepository()
