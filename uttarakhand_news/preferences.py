from __future__ import annotations

import json
import logging
from pathlib import Path

from uttarakhand_news.i18n import DEFAULT_LANGUAGE, LANGUAGES, Language, normalize_language

logger = logging.getLogger(__name__)

PREFERENCE_KEY = "preferred-language"


class LanguagePreference:
    """The reader's language choice, kept in a small JSON file between sessions."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Language:
        if not self._path.exists():
            return DEFAULT_LANGUAGE
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable preference file %s: %s", self._path, e)
            return DEFAULT_LANGUAGE
        if not isinstance(data, dict):
            return DEFAULT_LANGUAGE
        return normalize_language(data.get(PREFERENCE_KEY))

    def save(self, lang: str) -> None:
        if lang not in LANGUAGES:
            raise ValueError(f"unsupported language {lang!r}; expected one of {', '.join(LANGUAGES)}")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            f.write(json.dumps({PREFERENCE_KEY: lang}, ensure_ascii=False) + "\n")
