"""Endpoint resolution: fallback chains, dashboard search, outcomes."""
import unittest

from uttarakhand_news.errors import (
    CandidatesExhausted,
    NotFound,
    TransportError,
    TransportFailure,
    UpstreamRejected,
)
from uttarakhand_news.fallback import FallbackContentProvider
from uttarakhand_news.resolver import (
    Candidate,
    EndpointResolver,
    first_success,
    name_variants,
    unwrap_envelope,
)
from uttarakhand_news.types import Html

from tests.fakes import BASE_URLS, PRIMARY, FakeClient, article_payload, dashboard_payload, envelope


class TestFirstSuccess(unittest.IsolatedAsyncioTestCase):

    async def test_stops_at_first_success(self):
        """Later candidates are never invoked once one succeeds."""
        invoked = []

        async def fetch(c):
            invoked.append(c.label)
            return {"from": c.label}

        candidates = [Candidate("a", "https://a"), Candidate("b", "https://b"), Candidate("c", "https://c")]
        chosen, data = await first_success(candidates, fetch)

        self.assertEqual(chosen.label, "a")
        self.assertEqual(data, {"from": "a"})
        self.assertEqual(invoked, ["a"])

    async def test_skips_failures_in_order(self):
        invoked = []

        async def fetch(c):
            invoked.append(c.label)
            if c.label != "c":
                raise TransportError(c.url, "timeout")
            return 42

        candidates = [Candidate("a", "https://a"), Candidate("b", "https://b"), Candidate("c", "https://c")]
        chosen, data = await first_success(candidates, fetch)
        self.assertEqual((chosen.label, data), ("c", 42))
        self.assertEqual(invoked, ["a", "b", "c"])

    async def test_collects_every_failure(self):
        async def fetch(c):
            if c.label == "a":
                raise TransportError(c.url, "timeout")
            raise UpstreamRejected(c.url, "success flag is false")

        with self.assertRaises(CandidatesExhausted) as ctx:
            await first_success([Candidate("a", "https://a"), Candidate("b", "https://b")], fetch)
        self.assertEqual([f.url for f in ctx.exception.failures], ["https://a", "https://b"])
        self.assertFalse(ctx.exception.all_transport)


class TestEnvelope(unittest.TestCase):

    def test_unwraps_data(self):
        self.assertEqual(unwrap_envelope("u", {"success": True, "data": {"x": 1}}), {"x": 1})

    def test_rejects_bad_envelopes(self):
        for body in ({"success": False, "data": {"x": 1}}, {"success": True, "data": {}},
                     {"success": True, "data": []}, {"success": True}, ["not", "an", "object"]):
            with self.subTest(body=body):
                with self.assertRaises(UpstreamRejected):
                    unwrap_envelope("u", body)


class TestNameVariants(unittest.TestCase):

    def test_variants_without_repeats(self):
        self.assertEqual(name_variants("POLITICS"), ["POLITICS", "politics", "Politics"])
        self.assertEqual(name_variants("politics"), ["politics", "Politics"])
        self.assertEqual(name_variants("Dehradun"), ["Dehradun", "dehradun"])


class TestArticleBySlug(unittest.IsolatedAsyncioTestCase):

    def _resolver(self, client, fallback=True):
        return EndpointResolver(
            client, BASE_URLS, fallback=FallbackContentProvider() if fallback else None, page_limit=10
        )

    async def test_slug_endpoint_wins(self):
        client = FakeClient({
            f"{PRIMARY}/news/slug/kedarnath-snow": envelope(article_payload(
                "kedarnath-snow", content={"hi": {"html": "<p>बर्फ़</p>", "text": "बर्फ़"}, "en": {"text": "Snow"}},
            )),
        })
        resolved = await self._resolver(client).article_by_slug("kedarnath-snow")

        self.assertEqual(resolved.source, "api")
        self.assertEqual(resolved.article.body("hi"), Html("<p>बर्फ़</p>"))
        self.assertEqual(client.urls, [f"{PRIMARY}/news/slug/kedarnath-snow"])

    async def test_mirror_base_url_tried_second(self):
        client = FakeClient({
            f"{BASE_URLS[1]}/news/slug/kedarnath-snow": envelope(article_payload("kedarnath-snow")),
        })
        resolved = await self._resolver(client).article_by_slug("kedarnath-snow")
        self.assertEqual(resolved.source, "api")
        self.assertEqual(client.urls, [f"{BASE_URLS[0]}/news/slug/kedarnath-snow",
                                       f"{BASE_URLS[1]}/news/slug/kedarnath-snow"])

    async def test_dashboard_breaking_news_match(self):
        client = FakeClient({
            f"{PRIMARY}/news/dashboard": envelope(dashboard_payload(
                breaking=[article_payload("other"), article_payload("wanted", views=12)],
                latest=[article_payload("wanted", views=99)],
            )),
        })
        resolved = await self._resolver(client).article_by_slug("wanted")

        self.assertEqual(resolved.source, "dashboard")
        self.assertEqual(resolved.article.slug, "wanted")
        # breaking news is searched before latest news
        self.assertEqual(resolved.article.views, 12)

    async def test_dashboard_latest_news_match(self):
        client = FakeClient({
            f"{PRIMARY}/news/dashboard": envelope(dashboard_payload(
                breaking=[article_payload("other")], latest=[article_payload("wanted")],
            )),
        })
        resolved = await self._resolver(client).article_by_slug("wanted")
        self.assertEqual(resolved.source, "dashboard")

    async def test_no_match_anywhere_is_not_found(self):
        client = FakeClient({
            f"{PRIMARY}/news/slug/ghost": UpstreamRejected(f"{PRIMARY}/news/slug/ghost", "status 404"),
            f"{PRIMARY}/news/dashboard": envelope(dashboard_payload(breaking=[article_payload("other")])),
        })
        with self.assertRaises(NotFound):
            await self._resolver(client).article_by_slug("ghost")

    async def test_unreachable_everywhere_is_transport_failure(self):
        with self.assertRaises(TransportFailure):
            await self._resolver(FakeClient()).article_by_slug("ghost")

    async def test_fallback_article_returned_unchanged(self):
        provider = FallbackContentProvider()
        for static in provider.articles():
            with self.subTest(slug=static.slug):
                resolved = await self._resolver(FakeClient()).article_by_slug(static.slug)
                self.assertEqual(resolved.source, "fallback")
                self.assertEqual(resolved.article, static)

    async def test_without_fallback_provider(self):
        with self.assertRaises(TransportFailure):
            await self._resolver(FakeClient(), fallback=False).article_by_slug("char-dham-yatra-record")

    async def test_unusable_slug_record_tries_next_mirror(self):
        client = FakeClient({
            f"{BASE_URLS[0]}/news/slug/kedarnath-snow": envelope({"slug": "kedarnath-snow"}),
            f"{BASE_URLS[1]}/news/slug/kedarnath-snow": envelope(article_payload("kedarnath-snow")),
        })
        resolved = await self._resolver(client).article_by_slug("kedarnath-snow")
        self.assertEqual(resolved.source, "api")
        self.assertEqual(resolved.article.title.en, "Title kedarnath-snow")

    async def test_malformed_dashboard_counts_as_answered(self):
        client = FakeClient({f"{PRIMARY}/news/dashboard": envelope({"breaking_news": 5, "trending_news": True})})
        with self.assertRaises(NotFound):
            await self._resolver(client).article_by_slug("ghost")

    async def test_missing_client_makes_no_requests(self):
        resolver = EndpointResolver(None, BASE_URLS, fallback=FallbackContentProvider())
        with self.assertRaises(TransportFailure):
            await resolver.dashboard()
        resolved = await resolver.article_by_slug("char-dham-yatra-record")
        self.assertEqual(resolved.source, "fallback")

    async def test_offline_makes_no_requests(self):
        client = FakeClient()
        resolver = EndpointResolver(client, BASE_URLS, fallback=FallbackContentProvider(), offline=True)
        resolved = await resolver.article_by_slug("mussoorie-tourist-rush")
        self.assertEqual(resolved.source, "fallback")
        self.assertEqual(client.calls, [])


class TestCollections(unittest.IsolatedAsyncioTestCase):

    async def test_category_variants_and_pagination_params(self):
        client = FakeClient({
            f"{PRIMARY}/news/category/politics": envelope({
                "data": [article_payload("a"), article_payload("b")],
                "limit": 10, "page": 2, "total": 12, "totalPages": 2,
            }),
        })
        resolver = EndpointResolver(client, BASE_URLS, page_limit=10)
        page = await resolver.news_by_category("POLITICS", page=2)

        self.assertEqual([a.slug for a in page.items], ["a", "b"])
        self.assertEqual((page.page, page.total, page.total_pages), (2, 12, 2))
        self.assertEqual(client.urls, [
            f"{BASE_URLS[0]}/news/category/POLITICS",
            f"{BASE_URLS[1]}/news/category/POLITICS",
            f"{BASE_URLS[0]}/news/category/politics",
        ])
        self.assertEqual(client.calls[-1][1], {"page": 2, "limit": 10})

    async def test_city_rejected_everywhere_is_not_found(self):
        rejected = {"success": False, "data": None}
        client = FakeClient({
            f"{base}/news/city/{name}": rejected for base in BASE_URLS for name in ("Atlantis", "atlantis")
        })
        with self.assertRaises(NotFound):
            await EndpointResolver(client, BASE_URLS).news_by_city("Atlantis")

    async def test_city_unreachable_is_transport_failure(self):
        with self.assertRaises(TransportFailure):
            await EndpointResolver(FakeClient(), BASE_URLS).news_by_city("Dehradun")

    async def test_empty_listing_is_a_success(self):
        client = FakeClient({
            f"{PRIMARY}/news/city/Dehradun": envelope({"data": [], "limit": 10, "page": 1, "total": 0, "totalPages": 0}),
        })
        page = await EndpointResolver(client, BASE_URLS).news_by_city("Dehradun")
        self.assertEqual(page.items, [])
        self.assertEqual(page.total, 0)

    async def test_categories_and_cities(self):
        client = FakeClient({
            f"{PRIMARY}/news/categories": envelope({
                "data": [{"id": 7, "name_en": "Environment", "name_hi": "पर्यावरण", "created_at": "2025-01-01"}],
                "meta": {"total": 1, "page": 1, "limit": 10, "pages": 1},
            }),
            f"{PRIMARY}/cities": envelope({
                "cities": [{"id": 3, "name": {"en": "Almora", "hi": "अल्मोड़ा"}, "state": "Uttarakhand"}],
                "pagination": {"limit": 10, "page": 1, "pages": 1, "total": 1},
            }),
        })
        resolver = EndpointResolver(client, BASE_URLS)
        categories = await resolver.categories()
        cities = await resolver.cities()

        self.assertEqual(categories[0].name_hi, "पर्यावरण")
        self.assertEqual(cities[0].name.en, "Almora")
        self.assertEqual(cities[0].state, "Uttarakhand")

    def test_requires_base_url(self):
        with self.assertRaises(ValueError):
            EndpointResolver(FakeClient(), [])


if __name__ == '__main__':
    unittest.main()
