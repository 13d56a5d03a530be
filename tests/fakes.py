from __future__ import annotations

import asyncio
from typing import Any

from uttarakhand_news.errors import TransportError

BASE_URLS = ["https://api.test/api/v1", "http://api.test/api/v1"]
PRIMARY = BASE_URLS[0]


class FakeClient:
    """Answers from a url -> body table; unknown URLs fail like a refused connection."""

    def __init__(self, routes: dict[str, Any] | None = None, delay: float = 0.0) -> None:
        self.routes = dict(routes or {})
        self.delay = delay
        self.calls: list[tuple[str, Any]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_json(self, url: str, params: dict[str, Any] | None = None, *, timeout_seconds: float | None = None) -> Any:
        self.calls.append((url, params))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if url not in self.routes:
                raise TransportError(url, "connection refused")
            r = self.routes[url]
            if isinstance(r, Exception):
                raise r
            return r
        finally:
            self.in_flight -= 1

    @property
    def urls(self) -> list[str]:
        return [u for u, _ in self.calls]


class FakeClock:
    def __init__(self, t: float = 1000.0) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t


def envelope(data: Any, success: bool = True) -> dict[str, Any]:
    return {"success": success, "data": data}


def article_payload(slug: str, **extra: Any) -> dict[str, Any]:
    d: dict[str, Any] = {
        "slug": slug,
        "title": {"hi": f"शीर्षक {slug}", "en": f"Title {slug}"},
        "description": f"About {slug}",
        "image_url": f"https://img.test/{slug}.jpg",
        "published_at": "2025-01-24T10:00:00Z",
        "hours_ago": 3,
    }
    d.update(extra)
    return d


def dashboard_payload(breaking=(), latest=(), trending=(), categories=(), cities=()) -> dict[str, Any]:
    return {
        "breaking_news": list(breaking),
        "latest_news_by_category": list(latest),
        "trending_news": list(trending),
        "categories": list(categories),
        "cities": list(cities),
    }


WEATHER_PAYLOAD: dict[str, Any] = {
    "location": {
        "name": "Dehradun",
        "region": "Uttarakhand",
        "country": "India",
        "lat": 30.32,
        "lon": 78.03,
        "localtime": "2025-01-24 16:30",
    },
    "current": {
        "temp_c": 18.4,
        "is_day": 1,
        "condition": {"text": "Partly cloudy", "icon": "//cdn.test/116.png", "code": 1003},
        "wind_kph": 7.2,
        "wind_dir": "NW",
        "precip_mm": 0.0,
        "humidity": 52,
        "feelslike_c": 17.9,
        "vis_km": 10.0,
        "uv": 4.0,
    },
    "forecast": {
        "forecastday": [
            {
                "date": "2025-01-24",
                "day": {
                    "maxtemp_c": 21.0,
                    "mintemp_c": 8.5,
                    "daily_chance_of_rain": 10,
                    "condition": {"text": "Sunny"},
                },
            }
        ]
    },
}
