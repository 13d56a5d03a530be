"""Assemble render-ready content for each page of the site.

This is the error boundary: resolver outcomes (NotFound, TransportFailure)
become page states here and nothing is raised to the caller.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from bs4 import BeautifulSoup

from uttarakhand_news.errors import NotFound, TransportFailure
from uttarakhand_news.fallback import FallbackContentProvider
from uttarakhand_news.formatting import format_long_date, format_time_ago, hours_since, pagination_window
from uttarakhand_news.i18n import normalize_language, select, translate
from uttarakhand_news.resolver import EndpointResolver
from uttarakhand_news.slugs import category_display_name, category_slug, city_display_name, city_slug
from uttarakhand_news.types import (
    Article,
    Category,
    City,
    ContentBody,
    DashboardSnapshot,
    Empty,
    Html,
    PlainText,
    WeatherSnapshot,
)
from uttarakhand_news.weather import Coordinates, WeatherService, condition_label, location_label

logger = logging.getLogger(__name__)

OK = "ok"
NOT_FOUND = "not_found"
FAILED = "failed"
EMPTY = "empty"
UNRESOLVABLE = "unresolvable"
UNAVAILABLE = "unavailable"

META_DESCRIPTION_CHARS = 160


def html_to_text(markup: str) -> str:
    soup = BeautifulSoup(markup or "", "lxml")
    return soup.get_text(" ", strip=True)


def meta_description(body: ContentBody, fallback: str) -> str:
    if isinstance(body, Html):
        text = html_to_text(body.markup)
    elif isinstance(body, PlainText):
        text = " ".join(body.text.split())
    else:
        text = ""
    text = text or " ".join((fallback or "").split())
    if len(text) <= META_DESCRIPTION_CHARS:
        return text
    return text[: META_DESCRIPTION_CHARS - 1].rstrip() + "…"


@dataclass(frozen=True)
class ArticleCard:
    slug: str
    title: str
    description: str
    image_url: str
    time_ago: str
    published_label: str
    city: Optional[str] = None
    category: Optional[str] = None
    views: int = 0
    is_breaking: bool = False


@dataclass(frozen=True)
class ArticlePage:
    state: str
    slug: str
    language: str
    message: Optional[str] = None
    source: Optional[str] = None

    title: str = ""
    body: ContentBody = field(default_factory=Empty)
    summary: str = ""
    content_note: Optional[str] = None
    meta_description: str = ""
    image_url: str = ""
    time_ago: str = ""
    published_label: str = ""
    city: Optional[str] = None
    category: str = ""
    author: Optional[str] = None
    views: int = 0
    is_breaking: bool = False


@dataclass(frozen=True)
class NavLink:
    slug: str
    name: str
    count: int = 0


@dataclass(frozen=True)
class ListingPage:
    state: str
    kind: str  # "category" | "city"
    slug: str
    language: str
    title: str
    message: Optional[str] = None
    items: list[ArticleCard] = field(default_factory=list)
    page: int = 1
    total: int = 0
    total_pages: int = 0
    page_window: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class TrendingLink:
    slug: str
    title: str


@dataclass(frozen=True)
class HomePage:
    language: str
    source: str  # "live" | "fallback"
    hero: Optional[ArticleCard]
    secondary: list[ArticleCard]
    latest: list[ArticleCard]
    trending: list[TrendingLink]
    category_grid: list[NavLink]
    nav_categories: list[NavLink]
    nav_cities: list[NavLink]


@dataclass(frozen=True)
class DirectoryPage:
    kind: str  # "categories" | "cities"
    language: str
    source: str  # "live" | "fallback"
    entries: list[NavLink]


@dataclass(frozen=True)
class WeatherWidget:
    state: str
    language: str
    message: Optional[str] = None
    location: str = ""
    temp_c: Optional[float] = None
    condition: str = ""
    icon: str = ""
    humidity: Optional[int] = None
    wind_kph: Optional[float] = None
    vis_km: Optional[float] = None
    max_c: Optional[float] = None
    min_c: Optional[float] = None
    chance_of_rain: Optional[int] = None
    updated: str = ""


def _hours_ago(a: Article, now: Optional[datetime]) -> Optional[float]:
    if a.hours_ago is not None:
        return a.hours_ago
    return hours_since(a.published_at, now)


def article_card(a: Article, lang: str, now: Optional[datetime] = None) -> ArticleCard:
    return ArticleCard(
        slug=a.slug,
        title=a.title.get(lang),
        description=a.description,
        image_url=a.image_url,
        time_ago=format_time_ago(_hours_ago(a, now), lang),
        published_label=format_long_date(a.published_at, lang),
        city=select(a.city, lang),
        category=select(a.category.name, lang) if a.category else None,
        views=a.views,
        is_breaking=a.is_breaking,
    )


def _category_links(categories: list[Category], lang: str) -> list[NavLink]:
    return [NavLink(slug=category_slug(c.name_en), name=c.name.get(lang), count=c.count) for c in categories]


def _city_links(cities: list[City], lang: str) -> list[NavLink]:
    return [NavLink(slug=city_slug(c.name.en), name=c.name.get(lang)) for c in cities]


class PageAssembler:
    def __init__(
        self,
        resolver: EndpointResolver,
        fallback: FallbackContentProvider,
        weather: Optional[WeatherService] = None,
        *,
        now: Optional[datetime] = None,
    ) -> None:
        self._resolver = resolver
        self._fallback = fallback
        self._weather = weather
        # pinned clock for hours_ago derivation; None means wall clock
        self._now = now

    async def article_page(self, slug: str, lang: str) -> ArticlePage:
        lang = normalize_language(lang)
        try:
            resolved = await self._resolver.article_by_slug(slug)
        except NotFound:
            logger.info("article %r not found", slug)
            return ArticlePage(
                state=NOT_FOUND, slug=slug, language=lang, message=translate(lang, "article.not_found")
            )
        except TransportFailure:
            logger.error("article %r could not be loaded", slug)
            return ArticlePage(state=FAILED, slug=slug, language=lang, message=translate(lang, "article.failed"))

        a = resolved.article
        body = a.body(lang)
        note = translate(lang, "article.content_unavailable") if isinstance(body, Empty) else None
        return ArticlePage(
            state=OK,
            slug=a.slug,
            language=lang,
            source=resolved.source,
            title=a.title.get(lang),
            body=body,
            summary=a.description,
            content_note=note,
            meta_description=meta_description(body, a.description),
            image_url=a.image_url,
            time_ago=format_time_ago(_hours_ago(a, self._now), lang),
            published_label=format_long_date(a.published_at, lang),
            city=select(a.city, lang),
            category=select(a.category.name, lang) if a.category else translate(lang, "article.general"),
            author=a.author.username if a.author else None,
            views=a.views,
            is_breaking=a.is_breaking,
        )

    async def _listing(self, kind: str, slug: str, page: int, lang: str) -> ListingPage:
        lang = normalize_language(lang)
        page = max(1, int(page))
        if kind == "city":
            display = city_display_name(slug)
            # the API matches cities by English display name
            lookup = display.name.en
            fetch = self._resolver.news_by_city
        else:
            display = category_display_name(slug)
            lookup = slug
            fetch = self._resolver.news_by_category
        title = display.get(lang)

        try:
            result = await fetch(lookup, page)
        except NotFound:
            logger.info("%s %r is not known upstream", kind, slug)
            return ListingPage(
                state=UNRESOLVABLE, kind=kind, slug=slug, language=lang, title=title,
                message=translate(lang, "listing.unresolvable"), page=page,
            )
        except TransportFailure:
            logger.error("%s %r news could not be loaded", kind, slug)
            return ListingPage(
                state=FAILED, kind=kind, slug=slug, language=lang, title=title,
                message=translate(lang, "listing.failed"), page=page,
            )

        if not result.items:
            return ListingPage(
                state=EMPTY, kind=kind, slug=slug, language=lang, title=title,
                message=translate(lang, "listing.empty"), page=result.page,
                total=result.total, total_pages=result.total_pages,
            )

        first = result.items[0]
        if kind == "category" and first.category is not None:
            title = first.category.name.get(lang)

        return ListingPage(
            state=OK,
            kind=kind,
            slug=slug,
            language=lang,
            title=title,
            items=[article_card(a, lang, self._now) for a in result.items],
            page=result.page,
            total=result.total,
            total_pages=result.total_pages,
            page_window=pagination_window(result.page, result.total_pages),
        )

    async def category_page(self, category: str, page: int = 1, lang: str = "hi") -> ListingPage:
        return await self._listing("category", category, page, lang)

    async def city_page(self, city: str, page: int = 1, lang: str = "hi") -> ListingPage:
        return await self._listing("city", city, page, lang)

    async def home_page(self, lang: str) -> HomePage:
        lang = normalize_language(lang)
        results: list[Any] = await asyncio.gather(
            self._resolver.dashboard(),
            self._resolver.categories(),
            self._resolver.cities(),
            return_exceptions=True,
        )
        dash_r, cats_r, cities_r = results
        for r in results:
            if isinstance(r, BaseException) and not isinstance(r, Exception):
                raise r
            if isinstance(r, Exception) and not isinstance(r, (NotFound, TransportFailure)):
                logger.error("home page fetch failed unexpectedly, using fallback", exc_info=r)

        # the dashboard is used whole or not at all
        if isinstance(dash_r, DashboardSnapshot):
            snapshot, source = dash_r, "live"
        else:
            logger.warning("dashboard unavailable (%s), using fallback content", type(dash_r).__name__)
            snapshot, source = self._fallback.dashboard(), "fallback"

        categories = cats_r if isinstance(cats_r, list) and cats_r else None
        if categories is None:
            logger.info("category list unavailable, using fallback categories")
            categories = self._fallback.categories()
        cities = cities_r if isinstance(cities_r, list) and cities_r else None
        if cities is None:
            logger.info("city list unavailable, using fallback cities")
            cities = self._fallback.cities()

        if snapshot.breaking_news:
            featured = snapshot.breaking_news
        elif snapshot.latest_news_by_category:
            featured = snapshot.latest_news_by_category
        else:
            featured = self._fallback.articles()

        hero = article_card(featured[0], lang, self._now) if featured else None
        secondary = [article_card(a, lang, self._now) for a in featured[1:3]]

        if snapshot.trending_news:
            trending_items = snapshot.trending_news[:5]
        else:
            trending_items = self._fallback.trending()
        trending = [TrendingLink(slug=t.slug, title=t.title.get(lang)) for t in trending_items]

        grid = snapshot.categories or self._fallback.home_categories()

        return HomePage(
            language=lang,
            source=source,
            hero=hero,
            secondary=secondary,
            latest=[article_card(a, lang, self._now) for a in snapshot.latest_news_by_category],
            trending=trending,
            category_grid=_category_links(grid, lang),
            nav_categories=_category_links(categories, lang),
            nav_cities=_city_links(cities, lang),
        )

    async def categories_page(self, lang: str) -> DirectoryPage:
        lang = normalize_language(lang)
        try:
            categories, source = await self._resolver.categories(), "live"
        except (NotFound, TransportFailure):
            logger.warning("category list unavailable, using fallback categories")
            categories, source = self._fallback.categories(), "fallback"
        return DirectoryPage(kind="categories", language=lang, source=source,
                             entries=_category_links(categories, lang))

    async def cities_page(self, lang: str) -> DirectoryPage:
        lang = normalize_language(lang)
        try:
            cities, source = await self._resolver.cities(), "live"
        except (NotFound, TransportFailure):
            logger.warning("city list unavailable, using fallback cities")
            cities, source = self._fallback.cities(), "fallback"
        return DirectoryPage(kind="cities", language=lang, source=source, entries=_city_links(cities, lang))

    async def weather_widget(self, lang: str, coords: Optional[Coordinates] = None) -> WeatherWidget:
        lang = normalize_language(lang)
        unavailable = WeatherWidget(state=UNAVAILABLE, language=lang, message=translate(lang, "weather.unavailable"))
        if self._weather is None:
            return unavailable
        try:
            snap: WeatherSnapshot = await self._weather.current(coords)
        except TransportFailure:
            return unavailable

        today = snap.today
        return WeatherWidget(
            state=OK,
            language=lang,
            location=location_label(snap, lang),
            temp_c=snap.current.temp_c,
            condition=condition_label(snap, lang),
            icon=snap.current.condition_icon,
            humidity=snap.current.humidity,
            wind_kph=snap.current.wind_kph,
            vis_km=snap.current.vis_km,
            max_c=today.maxtemp_c if today else None,
            min_c=today.mintemp_c if today else None,
            chance_of_rain=today.daily_chance_of_rain if today else None,
            updated=snap.location.localtime,
        )
