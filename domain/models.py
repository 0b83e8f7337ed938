from typing import Any, Self


CityId = str
Json = dict[str, Any]


WHEN = ("today", "tomorrow")


class Recipe:
    def __init__(self, *, id: int, content: str) -> None:
        self.id = id
        self.content = content

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.id == other.id and self.content == other.content

    def to_dict(self) -> Json:
        return {"id": self.id, "content": self.content}


class CitySnapshot:
    def __init__(
        self,
        *,
        latitude: float,
        longitude: float,
        population: int,
        known_for: list[str],
    ) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.population = population
        self.known_for = known_for

    @classmethod
    def from_dict(cls, data: Json) -> Self:
        """Build from the provider's JSON.

        Coordinates come either as a `coordinates` pair / object or as top
        level `latitude` and `longitude` fields.
        """
        coordinates = data.get("coordinates")
        if isinstance(coordinates, dict):
            latitude = coordinates["latitude"]
            longitude = coordinates["longitude"]
        elif coordinates is not None:
            latitude, longitude = coordinates
        else:
            latitude, longitude = data["latitude"], data["longitude"]
        return cls(
            latitude=latitude,
            longitude=longitude,
            population=data["population"],
            known_for=list(data["knownFor"]),
        )

    @property
    def coordinates(self) -> list[float]:
        return [self.latitude, self.longitude]


class WeatherPrediction:
    def __init__(self, *, when: str, min: float, max: float) -> None:
        self.when = when
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        return f"<WeatherPrediction(when={self.when}, min={self.min}, max={self.max})>"

    def to_dict(self) -> Json:
        return {"when": self.when, "min": self.min, "max": self.max}


def label_predictions(entries: list[Json]) -> list[WeatherPrediction]:
    """Label the first two provider entries today then tomorrow, in order."""
    return [
        WeatherPrediction(when=when, min=entry["min"], max=entry["max"])
        for when, entry in zip(WHEN, entries)
    ]


class CityInfos:
    def __init__(
        self,
        *,
        city: CitySnapshot,
        weather_predictions: list[WeatherPrediction],
        recipes: tuple[Recipe, ...],
    ) -> None:
        self.city = city
        self.weather_predictions = weather_predictions
        self.recipes = recipes

    def to_dict(self) -> Json:
        return {
            "coordinates": self.city.coordinates,
            "population": self.city.population,
            "knownFor": self.city.known_for,
            "weatherPredictions": [w.to_dict() for w in self.weather_predictions],
            "recipes": [r.to_dict() for r in self.recipes],
        }
