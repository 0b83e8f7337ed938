"""Client for the upstream city and weather provider."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from domain.models import CityId, CitySnapshot, Json


logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api-ugi2pflmha-ew.a.run.app"


class CityNotFound(Exception):
    pass


class WeatherUnavailable(Exception):
    pass


def city_api_client(
    base_url: str = DEFAULT_BASE_URL,
    api_key: str = "",
    *,
    timeout: float | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"x-api-key": api_key},
        timeout=timeout,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CityApi:
    """Every call goes to the network. Nothing is cached or retried."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = city_api_client() if client is None else client

    async def _get(self, path: str) -> httpx.Response:
        return await self._client.get(path)

    async def city(self, city_id: CityId) -> CitySnapshot:
        try:
            resp = await self._get(f"/cities/{quote(city_id, safe='')}")
        except httpx.HTTPError as e:
            logger.warning("City request for %s failed: %r", city_id, e)
            raise CityNotFound("City not found") from e
        if not resp.is_success:
            logger.warning("City %s: upstream answered %s", city_id, resp.status_code)
            raise CityNotFound("City not found")
        try:
            return CitySnapshot.from_dict(resp.json())
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise CityNotFound("Invalid city data") from e

    async def weather(self, city_id: CityId) -> list[Json]:
        """The first two forecast entries, in provider order.

        The provider answers either an array of entries or an object whose
        values are the entries.
        """
        try:
            resp = await self._get(f"/weather/{quote(city_id, safe='')}")
        except httpx.HTTPError as e:
            logger.warning("Weather request for %s failed: %r", city_id, e)
            raise WeatherUnavailable("Failed to fetch weather data") from e
        if not resp.is_success:
            logger.warning(
                "Weather %s: upstream answered %s", city_id, resp.status_code
            )
            raise WeatherUnavailable("Failed to fetch weather data")

        try:
            data = resp.json()
        except ValueError as e:
            raise WeatherUnavailable("Invalid weather data") from e
        entries = list(data.values()) if isinstance(data, dict) else data
        if not isinstance(entries, list) or len(entries) < 2:
            raise WeatherUnavailable("Invalid weather data")
        entries = entries[:2]
        for entry in entries:
            if not (
                isinstance(entry, dict)
                and _is_number(entry.get("min"))
                and _is_number(entry.get("max"))
            ):
                raise WeatherUnavailable("Invalid weather data")
        return entries

    async def aclose(self) -> None:
        await self._client.aclose()
