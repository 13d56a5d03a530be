"""Language tags, UI strings and bilingual value selection.

The site is Hindi-first: every lookup that cannot be satisfied in the requested
language falls back to Hindi.
"""
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from uttarakhand_news.types import BilingualText

Language = Literal["hi", "en"]

LANGUAGES: tuple[str, ...] = ("hi", "en")
DEFAULT_LANGUAGE: Language = "hi"


TRANSLATIONS: dict[str, dict[str, Any]] = {
    "hi": {
        "site": {
            "name": "इनसाइड उत्तराखंड न्यूज़",
        },
        "nav": {
            "home": "होम",
            "dehradun": "देहरादून",
            "nainital": "नैनीताल",
            "haridwar": "हरिद्वार",
            "mussoorie": "मसूरी",
            "rishikesh": "ऋषिकेश",
        },
        "trending": {
            "title": "ट्रेंडिंग",
            "items": [
                "उत्तराखंड में नई पर्यटन नीति की घोषणा, स्थानीय व्यवसायों को मिलेगा बढ़ावा",
                "चारधाम यात्रा: इस साल रिकॉर्ड तीर्थयात्रियों की संख्या, व्यापारियों में खुशी",
                "देहरादून में नया आईटी पार्क, हजारों युवाओं को मिलेगा रोजगार",
                "उत्तराखंड के स्कूलों में नई शिक्षा नीति लागू, छात्रों में उत्साह",
                "मसूरी में पर्यटकों की भीड़, होटल व्यवसायियों ने की रिकॉर्ड कमाई",
            ],
        },
        "article": {
            "not_found": "लेख नहीं मिला",
            "failed": "लेख लोड नहीं हो सका",
            "content_unavailable": "इस लेख की पूरी सामग्री अभी उपलब्ध नहीं है।",
            "general": "सामान्य",
            "breaking": "ब्रेकिंग न्यूज़",
        },
        "listing": {
            "empty": "कोई समाचार उपलब्ध नहीं है।",
            "unresolvable": "यह पृष्ठ उपलब्ध नहीं है।",
            "failed": "समाचार लोड नहीं हो सके",
        },
        "weather": {
            "title": "आज का मौसम",
            "unavailable": "मौसम डेटा उपलब्ध नहीं है",
            "conditions": {
                "Clear": "साफ़ आसमान",
                "Sunny": "धूप",
                "Partly cloudy": "आंशिक बादल",
                "Cloudy": "बादल",
                "Overcast": "घने बादल",
                "Mist": "धुंध",
                "Patchy rain possible": "हल्की बारिश संभव",
                "Patchy rain nearby": "आस-पास हल्की बारिश",
                "Thundery outbreaks possible": "गरज के साथ बारिश संभव",
                "Fog": "कोहरा",
                "Light rain": "हल्की बारिश",
                "Moderate rain": "मध्यम बारिश",
                "Heavy rain": "भारी बारिश",
                "Light snow": "हल्की बर्फ़बारी",
                "Moderate snow": "मध्यम बर्फ़बारी",
                "Heavy snow": "भारी बर्फ़बारी",
            },
        },
    },
    "en": {
        "site": {
            "name": "Inside Uttarakhand News",
        },
        "nav": {
            "home": "Home",
            "dehradun": "Dehradun",
            "nainital": "Nainital",
            "haridwar": "Haridwar",
            "mussoorie": "Mussoorie",
            "rishikesh": "Rishikesh",
        },
        "trending": {
            "title": "Trending",
            "items": [
                "New tourism policy announced in Uttarakhand, local businesses to get boost",
                "Char Dham Yatra: Record number of pilgrims this year, traders rejoice",
                "New IT park in Dehradun, thousands of youth to get employment",
                "New education policy implemented in Uttarakhand schools, enthusiasm among students",
                "Tourist rush in Mussoorie, hotel businessmen make record earnings",
            ],
        },
        "article": {
            "not_found": "Article Not Found",
            "failed": "Failed to load article",
            "content_unavailable": "Full content for this article is not available yet.",
            "general": "General",
            "breaking": "Breaking News",
        },
        "listing": {
            "empty": "No news available.",
            "unresolvable": "This page is not available.",
            "failed": "Failed to load news",
        },
        "weather": {
            "title": "Today's Weather",
            "unavailable": "Weather data not available",
            "conditions": {
                "Clear": "Clear Sky",
                "Sunny": "Sunny",
                "Partly cloudy": "Partly Cloudy",
                "Cloudy": "Cloudy",
                "Overcast": "Overcast",
                "Mist": "Mist",
                "Patchy rain possible": "Light Rain Possible",
                "Patchy rain nearby": "Light Rain Nearby",
                "Thundery outbreaks possible": "Thunderstorms Possible",
                "Fog": "Fog",
                "Light rain": "Light Rain",
                "Moderate rain": "Moderate Rain",
                "Heavy rain": "Heavy Rain",
                "Light snow": "Light Snow",
                "Moderate snow": "Moderate Snow",
                "Heavy snow": "Heavy Snow",
            },
        },
    },
}


def normalize_language(value: Any) -> Language:
    v = str(value or "").strip().lower()
    if v in LANGUAGES:
        return v  # type: ignore[return-value]
    return DEFAULT_LANGUAGE


def translate(lang: str, key: str) -> Any:
    """Look up a dotted key such as ``"article.not_found"``.

    Raises KeyError for unknown keys so typos fail loudly in tests.
    """

    node: Any = TRANSLATIONS[normalize_language(lang)]
    for part in key.split("."):
        node = node[part]
    return node


def select(value: Union[BilingualText, str, None], lang: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, BilingualText):
        return value.get(lang)
    return str(value)


def weather_condition(text: str, lang: str) -> str:
    conditions = translate(lang, "weather.conditions")
    return conditions.get((text or "").strip(), text)
