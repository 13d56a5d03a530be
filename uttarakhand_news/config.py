from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")
WEATHER_KEY_ENV = "UTTARAKHAND_NEWS_WEATHER_API_KEY"


@dataclass(frozen=True)
class Config:
    raw: dict[str, Any]

    @property
    def api_base_urls(self) -> list[str]:
        urls = (self.raw.get("api", {}) or {}).get("base_urls") or []
        return [str(u) for u in urls if u]

    @property
    def page_limit(self) -> int:
        return int((self.raw.get("api", {}) or {}).get("page_limit", 10))

    @property
    def timeout_seconds(self) -> float:
        return float((self.raw.get("http", {}) or {}).get("timeout_seconds", 10))

    @property
    def user_agent(self) -> str:
        return str((self.raw.get("http", {}) or {}).get("user_agent", "uttarakhand-news/0.1"))

    @property
    def header_overrides(self) -> dict[str, Any]:
        return dict((self.raw.get("http", {}) or {}).get("header_overrides") or {})

    @property
    def max_connections(self) -> int:
        return int((self.raw.get("http", {}) or {}).get("max_connections", 10))

    @property
    def max_in_flight_requests(self) -> int:
        return int((self.raw.get("concurrency", {}) or {}).get("max_in_flight_requests", 6))

    @property
    def weather(self) -> dict[str, Any]:
        return dict(self.raw.get("weather", {}) or {})

    @property
    def weather_api_key(self) -> str | None:
        return os.environ.get(WEATHER_KEY_ENV) or self.weather.get("api_key") or None

    @property
    def weather_ttl_seconds(self) -> float:
        return float(self.weather.get("cache_ttl_seconds", 600))

    @property
    def preferences_file(self) -> Path:
        prefs = self.raw.get("preferences", {}) or {}
        return Path(os.path.expanduser(str(prefs.get("file", "~/.uttarakhand_news/preferences.json"))))


def load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(path: str | Path | None = None) -> Config:
    return Config(raw=load_yaml(path or DEFAULT_CONFIG_PATH))
