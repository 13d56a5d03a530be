"""Turn decoded API JSON into the frozen models in ``types``.

Upstream records are loosely shaped: optional fields go missing, ``city`` is
either a plain string, a bilingual object, or a full city record, and list
endpoints wrap their items under different keys. Everything here degrades to
defaults rather than raising.
"""
from __future__ import annotations

import math
from typing import Any, Optional

from uttarakhand_news.formatting import parse_dt
from uttarakhand_news.types import (
    Article,
    Author,
    BilingualText,
    Category,
    City,
    CityCount,
    ContentBody,
    DashboardSnapshot,
    Empty,
    Html,
    NewsPage,
    PlainText,
    TrendingItem,
)


def _int(value: Any, default: int = 0) -> int:
    try:
        return max(0, int(value))
    except (TypeError, ValueError, OverflowError):
        return default


def _opt_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _opt_float(value: Any) -> Optional[float]:
    try:
        f = float(value)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _flag(value: Any) -> bool:
    # upstream sends true/false, 0/1 or their string forms
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return False


def bilingual(value: Any) -> Optional[BilingualText]:
    if value is None:
        return None
    if isinstance(value, BilingualText):
        return value
    if isinstance(value, str):
        return BilingualText(hi=value, en=value) if value else None
    if isinstance(value, dict):
        hi = _str(value.get("hi"))
        en = _str(value.get("en"))
        if not hi and not en:
            return None
        return BilingualText(hi=hi or en, en=en or hi)
    return None


def city_name(value: Any) -> Optional[BilingualText]:
    """Accepts ``"Dehradun"``, ``{"hi", "en"}`` or ``{"name": {...}, "state": ...}``."""

    if isinstance(value, dict) and "name" in value:
        return bilingual(value.get("name"))
    return bilingual(value)


def content_body(value: Any) -> ContentBody:
    if isinstance(value, str):
        return PlainText(value) if value.strip() else Empty()
    if not isinstance(value, dict):
        return Empty()
    html = value.get("html")
    if isinstance(html, str) and html.strip():
        return Html(html)
    text = value.get("text")
    if isinstance(text, str) and text.strip():
        return PlainText(text)
    return Empty()


def category_from_payload(d: Any) -> Optional[Category]:
    if not isinstance(d, dict):
        return None
    name_en = _str(d.get("name_en"))
    name_hi = _str(d.get("name_hi"))
    if not name_en and not name_hi:
        return None
    return Category(
        id=_opt_int(d.get("id")),
        name_en=name_en or name_hi,
        name_hi=name_hi or name_en,
        created_at=_str(d.get("created_at")),
        count=_int(d.get("count")),
    )


def city_from_payload(d: Any) -> Optional[City]:
    if not isinstance(d, dict):
        return None
    name = bilingual(d.get("name"))
    if name is None:
        return None
    return City(id=_opt_int(d.get("id")), name=name, state=_str(d.get("state")))


def author_from_payload(d: Any) -> Optional[Author]:
    if not isinstance(d, dict) or not d.get("username"):
        return None
    author_id = d.get("id")
    return Author(id=None if author_id is None else str(author_id), username=str(d["username"]))


def article_from_payload(d: dict[str, Any]) -> Optional[Article]:
    if not isinstance(d, dict):
        return None
    slug = _str(d.get("slug")).strip()
    title = bilingual(d.get("title"))
    if not slug or title is None:
        return None

    content: dict[str, ContentBody] = {}
    raw_content = d.get("content")
    if isinstance(raw_content, dict):
        for lang in ("hi", "en"):
            body = content_body(raw_content.get(lang))
            if not isinstance(body, Empty):
                content[lang] = body

    return Article(
        slug=slug,
        title=title,
        description=_str(d.get("description")),
        image_url=_str(d.get("image_url")),
        published_at=parse_dt(d.get("published_at")),
        content=content,
        hours_ago=_opt_float(d.get("hours_ago")),
        category=category_from_payload(d.get("category")),
        city=city_name(d.get("city")),
        author=author_from_payload(d.get("author")),
        views=_int(d.get("views")),
        likes=_int(d.get("likes")),
        shares=_int(d.get("shares")),
        is_breaking=_flag(d.get("is_breaking")),
    )


def articles_from_payload(items: Any) -> list[Article]:
    out: list[Article] = []
    if not isinstance(items, list):
        return out
    for it in items:
        a = article_from_payload(it)
        if a is not None:
            out.append(a)
    return out


def _list_under(data: Any, *keys: str) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for k in keys:
            v = data.get(k)
            if isinstance(v, list):
                return v
    return []


def news_page_from_payload(data: Any, *, page: int, limit: int) -> NewsPage:
    items = articles_from_payload(_list_under(data, "data"))
    if not isinstance(data, dict):
        return NewsPage(items=items, page=page, limit=limit, total=len(items), total_pages=1 if items else 0)
    return NewsPage(
        items=items,
        page=_int(data.get("page"), page) or page,
        limit=_int(data.get("limit"), limit) or limit,
        total=_int(data.get("total"), len(items)),
        total_pages=_int(data.get("totalPages"), 0),
    )


def categories_from_payload(data: Any) -> list[Category]:
    out: list[Category] = []
    for d in _list_under(data, "data", "categories"):
        c = category_from_payload(d)
        if c is not None:
            out.append(c)
    return out


def cities_from_payload(data: Any) -> list[City]:
    out: list[City] = []
    for d in _list_under(data, "cities", "data"):
        c = city_from_payload(d)
        if c is not None:
            out.append(c)
    return out


def dashboard_from_payload(data: Any) -> DashboardSnapshot:
    if not isinstance(data, dict):
        return DashboardSnapshot()

    trending: list[TrendingItem] = []
    for d in _list_under(data.get("trending_news")):
        if not isinstance(d, dict):
            continue
        title = bilingual(d.get("title"))
        slug = _str(d.get("slug"))
        if slug and title is not None:
            trending.append(TrendingItem(slug=slug, title=title))

    city_counts: list[CityCount] = []
    for d in _list_under(data.get("cities")):
        if not isinstance(d, dict):
            continue
        name = bilingual(d.get("name"))
        if name is not None:
            city_counts.append(CityCount(name=name, count=_int(d.get("count"))))

    return DashboardSnapshot(
        breaking_news=articles_from_payload(data.get("breaking_news")),
        latest_news_by_category=articles_from_payload(data.get("latest_news_by_category")),
        trending_news=trending,
        categories=categories_from_payload(data.get("categories")),
        cities=city_counts,
    )
