"""Static stand-in content for when the content API cannot be used.

All values are module-level constants built once; every call hands back the
same objects, so the output is stable enough to compare for equality.
"""
from __future__ import annotations

from typing import Optional

from uttarakhand_news.i18n import TRANSLATIONS
from uttarakhand_news.formatting import parse_dt
from uttarakhand_news.types import (
    Article,
    BilingualText,
    Category,
    City,
    CityCount,
    DashboardSnapshot,
    Html,
    PlainText,
    TrendingItem,
)

_CREATED_AT = "2025-01-01T00:00:00Z"

FALLBACK_CATEGORIES: tuple[Category, ...] = (
    Category(id=1, name_en="Politics", name_hi="राजनीति", created_at=_CREATED_AT),
    Category(id=2, name_en="Education", name_hi="शिक्षा", created_at=_CREATED_AT),
    Category(id=3, name_en="Tourism", name_hi="पर्यटन", created_at=_CREATED_AT),
    Category(id=4, name_en="Business", name_hi="व्यापार", created_at=_CREATED_AT),
    Category(id=5, name_en="Sports", name_hi="खेल", created_at=_CREATED_AT),
)

# shown on the home page when the dashboard has no categories
HOME_CATEGORIES: tuple[Category, ...] = (
    FALLBACK_CATEGORIES[0],
    FALLBACK_CATEGORIES[2],
    FALLBACK_CATEGORIES[1],
)

_HEALTH = Category(id=6, name_en="Health", name_hi="स्वास्थ्य", created_at=_CREATED_AT)

FALLBACK_CITIES: tuple[City, ...] = (
    City(id=1, name=BilingualText(en="Dehradun", hi="देहरादून"), state="Uttarakhand"),
    City(id=2, name=BilingualText(en="Haridwar", hi="हरिद्वार"), state="Uttarakhand"),
    City(id=3, name=BilingualText(en="Rishikesh", hi="ऋषिकेश"), state="Uttarakhand"),
    City(id=4, name=BilingualText(en="Nainital", hi="नैनीताल"), state="Uttarakhand"),
    City(id=5, name=BilingualText(en="Mussoorie", hi="मसूरी"), state="Uttarakhand"),
)

_CITY = {c.name.en: c.name for c in FALLBACK_CITIES}

FEATURED_ARTICLES: tuple[Article, ...] = (
    Article(
        slug="uttarakhand-tourism-boost",
        title=BilingualText(
            hi="उत्तराखंड के पहाड़ों में नया पर्यटन केंद्र, पर्यटकों की संख्या बढ़ने की उम्मीद",
            en="New tourism center in Uttarakhand mountains, expected increase in tourist numbers",
        ),
        description="राज्य सरकार ने उत्तराखंड के पहाड़ी क्षेत्रों में नए पर्यटन केंद्र विकसित करने की योजना की घोषणा की है।",
        image_url="https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=800&h=600",
        published_at=parse_dt("2025-01-24T10:45:33.443768Z"),
        content={
            "hi": Html(
                "<p>उत्तराखंड सरकार ने राज्य के पहाड़ी क्षेत्रों में नए पर्यटन केंद्र विकसित करने की "
                "महत्वाकांक्षी योजना की घोषणा की है।</p>"
                "<p>इस योजना के पहले चरण में चमोली, पिथौरागढ़, उत्तरकाशी, रुद्रप्रयाग और बागेश्वर "
                "जिलों में पांच नए पर्यटन केंद्रों का विकास किया जाएगा।</p>"
            ),
            "en": PlainText(
                "The Uttarakhand government has announced an ambitious plan to develop new tourism "
                "centers in the state's hill regions.\n\n"
                "In the first phase, five new centers will be developed in the Chamoli, Pithoragarh, "
                "Uttarkashi, Rudraprayag and Bageshwar districts."
            ),
        },
        hours_ago=2,
        category=FALLBACK_CATEGORIES[2],
        city=_CITY["Dehradun"],
        is_breaking=True,
    ),
    Article(
        slug="char-dham-yatra-record",
        title=BilingualText(
            hi="चारधाम यात्रा: इस साल रिकॉर्ड तीर्थयात्रियों की संख्या",
            en="Char Dham Yatra: Record number of pilgrims this year",
        ),
        description="इस साल की चारधाम यात्रा में रिकॉर्ड संख्या में तीर्थयात्रियों ने पवित्र स्थानों का दर्शन किया है।",
        image_url="https://images.unsplash.com/photo-1544735716-392fe2489ffa?w=800&h=600",
        published_at=parse_dt("2025-01-24T08:30:33.443768Z"),
        hours_ago=4,
        category=FALLBACK_CATEGORIES[2],
        is_breaking=True,
    ),
)

LATEST_ARTICLES: tuple[Article, ...] = (
    Article(
        slug="uttarakhand-education-policy",
        title=BilingualText(
            hi="उत्तराखंड के स्कूलों में नई शिक्षा नीति लागू, छात्रों में उत्साह",
            en="New education policy implemented in Uttarakhand schools, enthusiasm among students",
        ),
        description="राज्य के सभी सरकारी स्कूलों में नई शिक्षा नीति लागू की गई है।",
        image_url="https://images.unsplash.com/photo-1523050854058-8df90110c9f1?w=400&h=300",
        published_at=parse_dt("2025-01-24T05:00:00Z"),
        hours_ago=8,
        category=FALLBACK_CATEGORIES[1],
        city=_CITY["Dehradun"],
        views=150,
    ),
    Article(
        slug="mussoorie-tourist-rush",
        title=BilingualText(
            hi="मसूरी में पर्यटकों की भीड़, होटल व्यवसायियों ने की रिकॉर्ड कमाई",
            en="Tourist rush in Mussoorie, hotel businessmen make record earnings",
        ),
        description="गर्मियों की छुट्टियों में मसूरी में पर्यटकों की भारी भीड़ देखी जा रही है।",
        image_url="https://images.unsplash.com/photo-1571896349842-33c89424de2d?w=400&h=300",
        published_at=parse_dt("2025-01-24T03:00:00Z"),
        hours_ago=10,
        category=FALLBACK_CATEGORIES[2],
        city=_CITY["Mussoorie"],
        views=230,
    ),
    Article(
        slug="haridwar-election-update",
        title=BilingualText(
            hi="हरिद्वार में चुनावी तैयारियां तेज, प्रशासन ने जारी की गाइडलाइन",
            en="Election preparations intensify in Haridwar, administration issues guidelines",
        ),
        description="आगामी चुनावों को लेकर हरिद्वार में तैयारियां तेज हो गई हैं।",
        image_url="https://images.unsplash.com/photo-1529107386315-e1a2ed48a620?w=400&h=300",
        published_at=parse_dt("2025-01-23T20:00:00Z"),
        hours_ago=17,
        category=FALLBACK_CATEGORIES[0],
        city=_CITY["Haridwar"],
        views=180,
    ),
    Article(
        slug="nainital-health-initiative",
        title=BilingualText(
            hi="नैनीताल में स्वास्थ्य सेवाओं का विस्तार, नई योजना की शुरुआत",
            en="Expansion of health services in Nainital, new scheme launched",
        ),
        description="नैनीताल में स्वास्थ्य सेवाओं के विस्तार के लिए नई योजना शुरू की गई है।",
        image_url="https://images.unsplash.com/photo-1576091160399-112ba8d25d1f?w=400&h=300",
        published_at=parse_dt("2025-01-23T18:00:00Z"),
        hours_ago=19,
        category=_HEALTH,
        city=_CITY["Nainital"],
        views=95,
    ),
)

_BY_SLUG: dict[str, Article] = {a.slug: a for a in FEATURED_ARTICLES + LATEST_ARTICLES}


def _trending() -> tuple[TrendingItem, ...]:
    hi_items = TRANSLATIONS["hi"]["trending"]["items"]
    en_items = TRANSLATIONS["en"]["trending"]["items"]
    return tuple(
        TrendingItem(slug=f"trending-{i}", title=BilingualText(hi=hi, en=en))
        for i, (hi, en) in enumerate(zip(hi_items, en_items))
    )


FALLBACK_TRENDING: tuple[TrendingItem, ...] = _trending()

FALLBACK_DASHBOARD = DashboardSnapshot(
    breaking_news=list(FEATURED_ARTICLES),
    latest_news_by_category=list(LATEST_ARTICLES),
    trending_news=list(FALLBACK_TRENDING),
    categories=list(HOME_CATEGORIES),
    cities=[CityCount(name=c.name, count=0) for c in FALLBACK_CITIES],
)


class FallbackContentProvider:
    def article(self, slug: str) -> Optional[Article]:
        return _BY_SLUG.get(slug)

    def articles(self) -> list[Article]:
        return list(FEATURED_ARTICLES + LATEST_ARTICLES)

    def categories(self) -> list[Category]:
        return list(FALLBACK_CATEGORIES)

    def home_categories(self) -> list[Category]:
        return list(HOME_CATEGORIES)

    def cities(self) -> list[City]:
        return list(FALLBACK_CITIES)

    def trending(self) -> list[TrendingItem]:
        return list(FALLBACK_TRENDING)

    def dashboard(self) -> DashboardSnapshot:
        return FALLBACK_DASHBOARD
