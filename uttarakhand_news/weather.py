from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from uttarakhand_news.cache import TimeBoxedCache
from uttarakhand_news.errors import FetchError, TransportFailure
from uttarakhand_news.i18n import weather_condition
from uttarakhand_news.resolver import JsonClient
from uttarakhand_news.types import WeatherCurrent, WeatherDay, WeatherLocation, WeatherSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


DEHRADUN = Coordinates(lat=30.3165, lon=78.0322)


def _f(value: Any) -> Optional[float]:
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def _i(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _section(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"weather payload field {key!r} is not an object")
    return value


def snapshot_from_payload(d: Any) -> WeatherSnapshot:
    if not isinstance(d, dict):
        raise ValueError("weather payload is not an object")
    loc = _section(d, "location")
    cur = _section(d, "current")
    temp_c = _f(cur.get("temp_c"))
    if not loc.get("name") or temp_c is None:
        raise ValueError("weather payload lacks location name or current temperature")

    cond = _section(cur, "condition")
    location = WeatherLocation(
        name=str(loc["name"]),
        region=str(loc.get("region") or ""),
        country=str(loc.get("country") or ""),
        lat=_f(loc.get("lat")),
        lon=_f(loc.get("lon")),
        localtime=str(loc.get("localtime") or ""),
    )
    current = WeatherCurrent(
        temp_c=temp_c,
        condition_text=str(cond.get("text") or ""),
        condition_icon=str(cond.get("icon") or ""),
        feelslike_c=_f(cur.get("feelslike_c")),
        humidity=_i(cur.get("humidity")),
        wind_kph=_f(cur.get("wind_kph")),
        wind_dir=str(cur.get("wind_dir") or ""),
        vis_km=_f(cur.get("vis_km")),
        precip_mm=_f(cur.get("precip_mm")),
        uv=_f(cur.get("uv")),
        is_day=bool(cur.get("is_day", 1)),
    )

    today = None
    days = _section(d, "forecast").get("forecastday") or []
    if not isinstance(days, list):
        raise ValueError("weather payload field 'forecastday' is not a list")
    if days:
        first = days[0] if isinstance(days[0], dict) else {}
        day = _section(first, "day")
        today = WeatherDay(
            date=str(first.get("date") or ""),
            maxtemp_c=_f(day.get("maxtemp_c")),
            mintemp_c=_f(day.get("mintemp_c")),
            daily_chance_of_rain=_i(day.get("daily_chance_of_rain")),
            condition_text=str(_section(day, "condition").get("text") or ""),
        )
    return WeatherSnapshot(location=location, current=current, today=today)


def location_label(snapshot: WeatherSnapshot, lang: str) -> str:
    name = snapshot.location.name
    if "dehradun" in name.lower() or "uttarakhand" in snapshot.location.region.lower():
        return name
    suffix = "(आपका स्थान)" if lang == "hi" else "(Your Location)"
    return f"{name} {suffix}"


def condition_label(snapshot: WeatherSnapshot, lang: str) -> str:
    return weather_condition(snapshot.current.condition_text, lang)


class WeatherService:
    """Current conditions plus today's forecast, held in a single cache slot.

    The slot is not keyed by location: a snapshot fetched for one place is
    served for any coordinates until it goes stale.
    """

    def __init__(
        self,
        client: Optional[JsonClient],
        cache: TimeBoxedCache,
        *,
        api_key: str | None,
        base_url: str = "https://api.weatherapi.com/v1",
        default_location: Coordinates = DEHRADUN,
        timeout_seconds: float = 5.0,
    ) -> None:
        self._client = client
        self._cache = cache
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._default = default_location
        self._timeout = timeout_seconds

    @property
    def cache(self) -> TimeBoxedCache:
        return self._cache

    async def current(self, coords: Coordinates | None = None) -> WeatherSnapshot:
        cached = self._cache.get()
        if cached is not None:
            return cached

        if self._client is None:
            raise TransportFailure("weather: offline")
        if not self._api_key:
            raise TransportFailure("weather: no API key configured")

        where = coords or self._default
        url = f"{self._base_url}/forecast.json"
        params = {"key": self._api_key, "q": f"{where.lat},{where.lon}", "days": 1}
        try:
            body = await self._client.get_json(url, params, timeout_seconds=self._timeout)
        except FetchError as e:
            logger.warning("weather fetch failed: %s", e.reason)
            raise TransportFailure("weather") from e

        try:
            snapshot = snapshot_from_payload(body)
        except ValueError as e:
            logger.warning("weather payload rejected: %s", e)
            raise TransportFailure("weather") from e

        self._cache.set(snapshot)
        return snapshot
