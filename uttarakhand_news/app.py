from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiohttp

from uttarakhand_news.cache import TimeBoxedCache
from uttarakhand_news.config import Config
from uttarakhand_news.fallback import FallbackContentProvider
from uttarakhand_news.http import HttpClient
from uttarakhand_news.pages import PageAssembler
from uttarakhand_news.resolver import EndpointResolver
from uttarakhand_news.weather import DEHRADUN, Coordinates, WeatherService


def build_assembler(cfg: Config, client: HttpClient | None, *, offline: bool = False) -> PageAssembler:
    fallback = FallbackContentProvider()
    resolver = EndpointResolver(
        client,
        cfg.api_base_urls,
        fallback=fallback,
        page_limit=cfg.page_limit,
        offline=offline,
    )

    w = cfg.weather
    loc = w.get("default_location") or {}
    default_location = Coordinates(lat=float(loc.get("lat", DEHRADUN.lat)), lon=float(loc.get("lon", DEHRADUN.lon)))
    weather = WeatherService(
        None if offline else client,
        TimeBoxedCache(cfg.weather_ttl_seconds),
        api_key=cfg.weather_api_key,
        base_url=str(w.get("base_url") or "https://api.weatherapi.com/v1"),
        default_location=default_location,
        timeout_seconds=float(w.get("timeout_seconds", 5)),
    )
    return PageAssembler(resolver, fallback, weather)


@asynccontextmanager
async def open_site(cfg: Config, *, offline: bool = False) -> AsyncIterator[PageAssembler]:
    """Yield a PageAssembler whose HTTP session lives as long as the context."""

    if offline:
        yield build_assembler(cfg, None, offline=True)
        return

    connector = aiohttp.TCPConnector(limit=cfg.max_connections)
    async with aiohttp.ClientSession(connector=connector) as session:
        client = HttpClient(
            session=session,
            semaphore=asyncio.Semaphore(cfg.max_in_flight_requests),
            user_agent=cfg.user_agent,
            timeout_seconds=cfg.timeout_seconds,
            header_overrides=cfg.header_overrides,
        )
        yield build_assembler(cfg, client)
