"""Display name <-> URL slug mapping for cities and categories.

The forward and reverse city tables are kept separately and are not inverses
of each other: the reverse table only knows the major cities, and an unknown
slug produces an ASCII guess for both languages.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from uttarakhand_news.types import BilingualText

_WS = re.compile(r"\s+")


CITY_SLUGS: dict[str, str] = {
    "Dehradun": "dehradun",
    "देहरादून": "dehradun",
    "Haridwar": "haridwar",
    "हरिद्वार": "haridwar",
    "Rishikesh": "rishikesh",
    "ऋषिकेश": "rishikesh",
    "Nainital": "nainital",
    "नैनीताल": "nainital",
    "Mussoorie": "mussoorie",
    "मसूरी": "mussoorie",
    "Almora": "almora",
    "अल्मोड़ा": "almora",
    "Pauri": "pauri",
    "पौड़ी": "pauri",
    "Bageshwar": "bageshwar",
    "बागेश्वर": "bageshwar",
    "Chamoli": "chamoli",
    "चमोली": "chamoli",
    "Uttarkashi": "uttarkashi",
    "उत्तरकाशी": "uttarkashi",
    "Pithoragarh": "pithoragarh",
    "पिथौरागढ़": "pithoragarh",
    "Rudraprayag": "rudraprayag",
    "रुद्रप्रयाग": "rudraprayag",
    "Tehri": "tehri",
    "टिहरी": "tehri",
    "Haldwani": "haldwani",
    "हल्द्वानी": "haldwani",
    "Kashipur": "kashipur",
    "काशीपुर": "kashipur",
    "Kotdwar": "kotdwar",
    "कोटद्वार": "kotdwar",
    "Ramnagar": "ramnagar",
    "रामनगर": "ramnagar",
    "Roorkee": "roorkee",
    "रुड़की": "roorkee",
    "Tanakpur": "tanakpur",
    "तनकपुर": "tanakpur",
}

CITY_NAMES: dict[str, BilingualText] = {
    "dehradun": BilingualText(en="Dehradun", hi="देहरादून"),
    "nainital": BilingualText(en="Nainital", hi="नैनीताल"),
    "haridwar": BilingualText(en="Haridwar", hi="हरिद्वार"),
    "mussoorie": BilingualText(en="Mussoorie", hi="मसूरी"),
    "rishikesh": BilingualText(en="Rishikesh", hi="ऋषिकेश"),
    "almora": BilingualText(en="Almora", hi="अल्मोड़ा"),
    "pauri": BilingualText(en="Pauri", hi="पौड़ी"),
    "bageshwar": BilingualText(en="Bageshwar", hi="बागेश्वर"),
    "chamoli": BilingualText(en="Chamoli", hi="चमोली"),
    "uttarkashi": BilingualText(en="Uttarkashi", hi="उत्तरकाशी"),
    "pithoragarh": BilingualText(en="Pithoragarh", hi="पिथौरागढ़"),
    "rudraprayag": BilingualText(en="Rudraprayag", hi="रुद्रप्रयाग"),
    "tehri": BilingualText(en="Tehri", hi="टिहरी"),
}

CATEGORY_SLUGS: dict[str, str] = {
    "Politics": "politics",
    "राजनीति": "politics",
    "Education": "education",
    "शिक्षा": "education",
    "Tourism": "tourism",
    "पर्यटन": "tourism",
    "Business": "business",
    "व्यापार": "business",
    "Sports": "sports",
    "खेल": "sports",
    "Health": "health",
    "स्वास्थ्य": "health",
    "Entertainment": "entertainment",
    "मनोरंजन": "entertainment",
    "Accidents": "accidents",
    "दुर्घटनाएं": "accidents",
}

CATEGORY_NAMES: dict[str, BilingualText] = {
    "politics": BilingualText(en="Politics", hi="राजनीति"),
    "education": BilingualText(en="Education", hi="शिक्षा"),
    "tourism": BilingualText(en="Tourism", hi="पर्यटन"),
    "business": BilingualText(en="Business", hi="व्यापार"),
    "sports": BilingualText(en="Sports", hi="खेल"),
    "health": BilingualText(en="Health", hi="स्वास्थ्य"),
    "entertainment": BilingualText(en="Entertainment", hi="मनोरंजन"),
    "accidents": BilingualText(en="Accidents", hi="दुर्घटनाएं"),
}


@dataclass(frozen=True)
class DisplayName:
    name: BilingualText
    # True when the name was guessed from the slug; the Hindi side is then not Hindi.
    approximate: bool = False

    def get(self, lang: str) -> str:
        return self.name.get(lang)


def slugify(name: str) -> str:
    return _WS.sub("-", (name or "").strip().lower())


def city_slug(name: str) -> str:
    known = CITY_SLUGS.get(name)
    if known:
        return known
    return slugify(name)


def category_slug(name: str) -> str:
    known = CATEGORY_SLUGS.get(name)
    if known:
        return known
    return slugify(name).replace("&", "and")


def _capitalize(slug: str) -> str:
    return slug[:1].upper() + slug[1:]


def city_display_name(slug: str) -> DisplayName:
    known = CITY_NAMES.get((slug or "").lower())
    if known:
        return DisplayName(name=known)
    guess = _capitalize(slug or "")
    return DisplayName(name=BilingualText(hi=guess, en=guess), approximate=True)


def category_display_name(slug: str) -> DisplayName:
    known = CATEGORY_NAMES.get((slug or "").lower())
    if known:
        return DisplayName(name=known)
    guess = _capitalize(slug or "")
    return DisplayName(name=BilingualText(hi=guess, en=guess), approximate=True)
