from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from typing import Any, Optional, Sequence

from uttarakhand_news.app import open_site
from uttarakhand_news.config import load_config
from uttarakhand_news.pages import ArticlePage, PageAssembler
from uttarakhand_news.preferences import LanguagePreference
from uttarakhand_news.types import ContentBody, Html, PlainText
from uttarakhand_news.weather import Coordinates


def body_to_dict(body: ContentBody) -> dict[str, Any]:
    if isinstance(body, Html):
        return {"kind": "html", "value": body.markup}
    if isinstance(body, PlainText):
        return {"kind": "text", "value": body.text}
    return {"kind": "empty", "value": None}


def to_jsonable(page: Any) -> Any:
    if not is_dataclass(page):
        return page
    d = asdict(page)
    if isinstance(page, ArticlePage):
        d["body"] = body_to_dict(page.body)
    return d


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="uttarakhand_news", description="Assemble site pages from the news API.")
    p.add_argument("--config", default=None, help="Path to a YAML config (defaults to the packaged one)")
    p.add_argument("--lang", choices=["hi", "en"], default=None, help="Language; remembered for next time")
    p.add_argument("--offline", action="store_true", help="Do not call the API; serve fallback content")
    p.add_argument("-v", "--verbose", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)
    sub.add_parser("home")
    a = sub.add_parser("article")
    a.add_argument("slug")
    c = sub.add_parser("category")
    c.add_argument("category")
    c.add_argument("--page", type=int, default=1)
    ct = sub.add_parser("city")
    ct.add_argument("city")
    ct.add_argument("--page", type=int, default=1)
    sub.add_parser("categories")
    sub.add_parser("cities")
    w = sub.add_parser("weather")
    w.add_argument("--lat", type=float, default=None)
    w.add_argument("--lon", type=float, default=None)
    return p


async def render(site: PageAssembler, args: argparse.Namespace, lang: str) -> Any:
    if args.command == "home":
        return await site.home_page(lang)
    if args.command == "article":
        return await site.article_page(args.slug, lang)
    if args.command == "category":
        return await site.category_page(args.category, args.page, lang)
    if args.command == "city":
        return await site.city_page(args.city, args.page, lang)
    if args.command == "categories":
        return await site.categories_page(lang)
    if args.command == "cities":
        return await site.cities_page(lang)
    if args.command == "weather":
        coords = None
        if args.lat is not None and args.lon is not None:
            coords = Coordinates(lat=args.lat, lon=args.lon)
        return await site.weather_widget(lang, coords)
    raise ValueError(f"unknown page {args.command!r}")


async def _run(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)

    prefs = LanguagePreference(cfg.preferences_file)
    if args.lang:
        prefs.save(args.lang)
        lang = args.lang
    else:
        lang = prefs.load()

    async with open_site(cfg, offline=args.offline) as site:
        page = await render(site, args, lang)

    json.dump(to_jsonable(page), sys.stdout, ensure_ascii=False, indent=2, default=str)
    sys.stdout.write("\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))
