"""Resolve logical fetch intents against an unreliable content API.

Every intent becomes an ordered list of :class:`Candidate` requests (mirror
base URLs, name-casing variants). :func:`first_success` walks the list and
stops at the first usable envelope; nothing is merged across candidates.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Optional, Protocol
from urllib.parse import quote

from uttarakhand_news.errors import (
    CandidatesExhausted,
    FetchError,
    NotFound,
    TransportError,
    TransportFailure,
    UpstreamRejected,
)
from uttarakhand_news.fallback import FallbackContentProvider
from uttarakhand_news.payloads import (
    article_from_payload,
    categories_from_payload,
    cities_from_payload,
    dashboard_from_payload,
    news_page_from_payload,
)
from uttarakhand_news.types import Article, Category, City, DashboardSnapshot, NewsPage

logger = logging.getLogger(__name__)


class JsonClient(Protocol):
    async def get_json(
        self, url: str, params: dict[str, Any] | None = None, *, timeout_seconds: float | None = None
    ) -> Any: ...


@dataclass(frozen=True)
class Candidate:
    label: str
    url: str
    params: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class ResolvedArticle:
    article: Article
    source: str  # "api" | "dashboard" | "fallback"


def unwrap_envelope(url: str, body: Any) -> Any:
    """Return ``data`` from a ``{success, data}`` envelope or raise UpstreamRejected."""

    if not isinstance(body, dict):
        raise UpstreamRejected(url, "response is not an envelope object")
    if not body.get("success"):
        raise UpstreamRejected(url, "success flag is false")
    data = body.get("data")
    if not data:
        raise UpstreamRejected(url, "empty data payload")
    return data


async def first_success(
    candidates: Iterable[Candidate],
    fetch: Callable[[Candidate], Awaitable[Any]],
) -> tuple[Candidate, Any]:
    """Try candidates in order; return the first one that yields data.

    Failures are logged and collected. Raises CandidatesExhausted with all of
    them when no candidate succeeds.
    """

    failures: list[FetchError] = []
    for c in candidates:
        logger.debug("trying %s", c.label)
        try:
            data = await fetch(c)
        except FetchError as e:
            logger.warning("candidate %s failed: %s", c.label, e.reason)
            failures.append(e)
            continue
        return c, data
    raise CandidatesExhausted(failures)


def name_variants(name: str) -> list[str]:
    """Verbatim, lower-cased and capitalised forms, without repeats."""

    variants = [name, name.lower(), name[:1].upper() + name[1:].lower()]
    out: list[str] = []
    for v in variants:
        if v and v not in out:
            out.append(v)
    return out


def _article_or_reject(data: Any) -> Article:
    article = article_from_payload(data)
    if article is None:
        raise ValueError("article lacks a slug or title")
    return article


def _outcome(exc: CandidatesExhausted, what: str) -> Exception:
    if exc.failures and not exc.all_transport:
        return NotFound(what)
    return TransportFailure(what)


class EndpointResolver:
    def __init__(
        self,
        client: Optional[JsonClient],
        base_urls: list[str],
        *,
        fallback: Optional[FallbackContentProvider] = None,
        page_limit: int = 10,
        offline: bool = False,
    ) -> None:
        if not base_urls:
            raise ValueError("at least one API base URL is required")
        self._client = client
        self._base_urls = [u.rstrip("/") for u in base_urls]
        self._fallback = fallback
        self._limit = int(page_limit)
        self._offline = offline or client is None

    @property
    def page_limit(self) -> int:
        return self._limit

    def _candidates(self, path: str, params: dict[str, Any] | None = None) -> list[Candidate]:
        return [Candidate(label=f"{base}/{path}", url=f"{base}/{path}", params=params) for base in self._base_urls]

    async def _fetch(self, c: Candidate, parse: Callable[[Any], Any]) -> Any:
        if self._client is None:
            raise TransportError(c.url, "no HTTP client")
        body = await self._client.get_json(c.url, c.params)
        data = unwrap_envelope(c.url, body)
        # a payload that cannot be parsed fails this candidate like any other rejection
        try:
            return parse(data)
        except (TypeError, ValueError, AttributeError, KeyError) as e:
            raise UpstreamRejected(c.url, f"malformed payload ({type(e).__name__}: {e})") from e

    async def _resolve(self, candidates: list[Candidate], parse: Callable[[Any], Any]) -> Any:
        if self._offline:
            raise CandidatesExhausted([TransportError(c.url, "offline") for c in candidates])
        _, result = await first_success(candidates, lambda c: self._fetch(c, parse))
        return result

    async def dashboard(self) -> DashboardSnapshot:
        try:
            return await self._resolve(self._candidates("news/dashboard"), dashboard_from_payload)
        except CandidatesExhausted as e:
            raise _outcome(e, "dashboard") from e

    async def categories(self) -> list[Category]:
        try:
            return await self._resolve(self._candidates("news/categories"), categories_from_payload)
        except CandidatesExhausted as e:
            raise _outcome(e, "categories") from e

    async def cities(self) -> list[City]:
        try:
            return await self._resolve(self._candidates("cities"), cities_from_payload)
        except CandidatesExhausted as e:
            raise _outcome(e, "cities") from e

    async def _news_by(self, kind: str, name: str, page: int) -> NewsPage:
        page = max(1, int(page))
        params = {"page": page, "limit": self._limit}
        candidates: list[Candidate] = []
        for variant in name_variants(name):
            candidates.extend(self._candidates(f"news/{kind}/{quote(variant, safe='')}", params))
        try:
            return await self._resolve(
                candidates, lambda data: news_page_from_payload(data, page=page, limit=self._limit)
            )
        except CandidatesExhausted as e:
            raise _outcome(e, f"{kind} {name!r}") from e

    async def news_by_category(self, name: str, page: int = 1) -> NewsPage:
        return await self._news_by("category", name, page)

    async def news_by_city(self, name: str, page: int = 1) -> NewsPage:
        return await self._news_by("city", name, page)

    async def article_by_slug(self, slug: str) -> ResolvedArticle:
        """Slug endpoints, then a dashboard search, then static fallback content.

        Raises NotFound when the sources that answered do not have the slug,
        TransportFailure when they could not be reached.
        """

        path = f"news/slug/{quote(slug, safe='')}"
        try:
            article = await self._resolve(self._candidates(path), _article_or_reject)
        except CandidatesExhausted:
            logger.info("slug endpoints exhausted for %r, searching dashboard", slug)
        else:
            return ResolvedArticle(article=article, source="api")

        dashboard_reachable = True
        try:
            snapshot = await self.dashboard()
        except NotFound:
            snapshot = None
        except TransportFailure:
            snapshot = None
            dashboard_reachable = False
        if snapshot is not None:
            found = snapshot.find(slug)
            if found is not None:
                return ResolvedArticle(article=found, source="dashboard")

        if self._fallback is not None:
            static = self._fallback.article(slug)
            if static is not None:
                logger.info("serving fallback article for %r", slug)
                return ResolvedArticle(article=static, source="fallback")

        if dashboard_reachable:
            raise NotFound(f"article {slug!r}")
        raise TransportFailure(f"article {slug!r}")
