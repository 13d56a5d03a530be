from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from uttarakhand_news.errors import TransportError, UpstreamRejected

logger = logging.getLogger(__name__)


class HttpClient:
    """JSON GETs over a shared session, one attempt per call.

    Any failure is raised as a ``FetchError`` subclass; callers decide whether
    to try another candidate.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        semaphore: asyncio.Semaphore,
        user_agent: str,
        timeout_seconds: float,
        header_overrides: dict[str, Optional[str]] | None = None,
    ) -> None:
        self._session = session
        self._sem = semaphore
        self._ua = user_agent
        self._hdr_overrides = {str(k): (None if v is None else str(v)) for k, v in (header_overrides or {}).items()}
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "User-Agent": self._ua,
            "Accept": "application/json",
            "Accept-Language": "hi-IN,hi;q=0.9,en;q=0.8",
        }
        for k, v in self._hdr_overrides.items():
            if v is None:
                headers.pop(k, None)
            else:
                headers[k] = v
        return headers

    async def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        timeout_seconds: float | None = None,
    ) -> Any:
        timeout = self._timeout if timeout_seconds is None else aiohttp.ClientTimeout(total=timeout_seconds)
        logger.debug("GET %s params=%s", url, params)

        async with self._sem:
            try:
                async with self._session.get(url, params=params, headers=self._headers(), timeout=timeout) as r:
                    status = r.status
                    if status == 404:
                        raise UpstreamRejected(url, "status 404")
                    if not 200 <= status < 300:
                        raise TransportError(url, f"status {status}")

                    content_type = r.headers.get("Content-Type", "")
                    if "application/json" not in content_type.lower():
                        raise TransportError(url, f"unexpected content type {content_type or 'none'!r}")

                    body = await r.text(errors="replace")
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise TransportError(url, f"{type(e).__name__}: {e}") from e

        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise TransportError(url, f"malformed JSON ({e})") from e
