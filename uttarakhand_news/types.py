from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class BilingualText:
    hi: str
    en: str

    def get(self, lang: str) -> str:
        value = self.en if lang == "en" else self.hi
        return value or self.hi


@dataclass(frozen=True)
class Html:
    markup: str


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Empty:
    pass


ContentBody = Union[Html, PlainText, Empty]


@dataclass(frozen=True)
class Category:
    id: Optional[int]
    name_en: str
    name_hi: str
    created_at: str = ""
    count: int = 0

    @property
    def name(self) -> BilingualText:
        return BilingualText(hi=self.name_hi, en=self.name_en)


@dataclass(frozen=True)
class City:
    id: Optional[int]
    name: BilingualText
    state: str = ""


@dataclass(frozen=True)
class CityCount:
    name: BilingualText
    count: int = 0


@dataclass(frozen=True)
class Author:
    id: Optional[str]
    username: str


@dataclass(frozen=True)
class Article:
    slug: str
    title: BilingualText
    description: str = ""
    image_url: str = ""
    published_at: Optional[datetime] = None

    # per-language body, resolved html -> text at parse time
    content: dict[str, ContentBody] = field(default_factory=dict)

    hours_ago: Optional[float] = None
    category: Optional[Category] = None
    city: Optional[BilingualText] = None
    author: Optional[Author] = None

    views: int = 0
    likes: int = 0
    shares: int = 0
    is_breaking: bool = False

    def body(self, lang: str) -> ContentBody:
        return self.content.get(lang, Empty())


@dataclass(frozen=True)
class TrendingItem:
    slug: str
    title: BilingualText


@dataclass(frozen=True)
class NewsPage:
    items: list[Article]
    page: int = 1
    limit: int = 10
    total: int = 0
    total_pages: int = 0


@dataclass(frozen=True)
class DashboardSnapshot:
    breaking_news: list[Article] = field(default_factory=list)
    latest_news_by_category: list[Article] = field(default_factory=list)
    trending_news: list[TrendingItem] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    cities: list[CityCount] = field(default_factory=list)

    def find(self, slug: str) -> Optional[Article]:
        for a in self.breaking_news:
            if a.slug == slug:
                return a
        for a in self.latest_news_by_category:
            if a.slug == slug:
                return a
        return None


@dataclass(frozen=True)
class WeatherLocation:
    name: str
    region: str = ""
    country: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None
    localtime: str = ""


@dataclass(frozen=True)
class WeatherCurrent:
    temp_c: float
    condition_text: str = ""
    condition_icon: str = ""
    feelslike_c: Optional[float] = None
    humidity: Optional[int] = None
    wind_kph: Optional[float] = None
    wind_dir: str = ""
    vis_km: Optional[float] = None
    precip_mm: Optional[float] = None
    uv: Optional[float] = None
    is_day: bool = True


@dataclass(frozen=True)
class WeatherDay:
    date: str
    maxtemp_c: Optional[float] = None
    mintemp_c: Optional[float] = None
    daily_chance_of_rain: Optional[int] = None
    condition_text: str = ""


@dataclass(frozen=True)
class WeatherSnapshot:
    location: WeatherLocation
    current: WeatherCurrent
    today: Optional[WeatherDay] = None

