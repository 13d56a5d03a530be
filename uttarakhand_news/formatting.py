from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from dateutil import parser as dateparser

# Dates are shown as readers in India see them.
DISPLAY_TZ = timezone(timedelta(hours=5, minutes=30))

_MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MONTHS_HI = (
    "जनवरी", "फ़रवरी", "मार्च", "अप्रैल", "मई", "जून",
    "जुलाई", "अगस्त", "सितंबर", "अक्टूबर", "नवंबर", "दिसंबर",
)


def parse_dt(value: Union[str, datetime, None]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = dateparser.parse(str(value))
        except (ValueError, OverflowError):
            return None
    if dt is None:
        return None
    # Ensure tz-aware for consistent comparisons
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def hours_since(published_at: Optional[datetime], now: Optional[datetime] = None) -> Optional[float]:
    if published_at is None:
        return None
    now = now or datetime.now(timezone.utc)
    return max(0.0, (now - published_at).total_seconds() / 3600.0)


def format_time_ago(hours_ago: Optional[float], lang: str) -> str:
    if hours_ago is None or not math.isfinite(hours_ago) or hours_ago < 1:
        return "अभी" if lang == "hi" else "Now"

    if hours_ago < 24:
        hours = int(math.floor(hours_ago))
        if lang == "hi":
            return f"{hours} घंटा पहले" if hours == 1 else f"{hours} घंटे पहले"
        return f"{hours} hour ago" if hours == 1 else f"{hours} hours ago"

    days = int(hours_ago // 24)
    if lang == "hi":
        return f"{days} दिन पहले"
    return f"{days} day ago" if days == 1 else f"{days} days ago"


def format_long_date(value: Union[str, datetime, None], lang: str) -> str:
    dt = parse_dt(value)
    if dt is None:
        return ""
    local = dt.astimezone(DISPLAY_TZ)
    if lang == "hi":
        return f"{local.day} {_MONTHS_HI[local.month - 1]} {local.year}"
    return f"{_MONTHS_EN[local.month - 1]} {local.day}, {local.year}"


def pagination_window(current: int, total_pages: int, max_visible: int = 5) -> list[int]:
    """Page numbers to show around ``current``, at most ``max_visible`` of them."""

    if total_pages <= 1:
        return []
    start = max(1, current - max_visible // 2)
    end = min(total_pages, start + max_visible - 1)
    if end - start + 1 < max_visible:
        start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))
