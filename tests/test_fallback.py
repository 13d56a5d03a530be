"""Static fallback content is complete and stable."""
import unittest

from uttarakhand_news.fallback import FallbackContentProvider


class TestFallbackContent(unittest.TestCase):

    def setUp(self):
        self.provider = FallbackContentProvider()

    def test_articles_are_fully_populated(self):
        articles = self.provider.articles()
        self.assertEqual(len(articles), 6)
        for a in articles:
            with self.subTest(slug=a.slug):
                self.assertTrue(a.title.hi and a.title.en)
                self.assertIsNotNone(a.published_at)
                self.assertGreaterEqual(a.views, 0)
                self.assertTrue(a.description)

    def test_slugs_are_unique(self):
        slugs = [a.slug for a in self.provider.articles()]
        self.assertEqual(len(slugs), len(set(slugs)))

    def test_every_read_is_identical(self):
        self.assertEqual(self.provider.articles(), FallbackContentProvider().articles())
        self.assertIs(self.provider.article("char-dham-yatra-record"), self.provider.article("char-dham-yatra-record"))
        self.assertIs(self.provider.dashboard(), self.provider.dashboard())

    def test_unknown_slug(self):
        self.assertIsNone(self.provider.article("does-not-exist"))

    def test_categories_and_cities(self):
        self.assertEqual([c.name_en for c in self.provider.categories()],
                         ["Politics", "Education", "Tourism", "Business", "Sports"])
        self.assertEqual([c.name_en for c in self.provider.home_categories()], ["Politics", "Tourism", "Education"])
        self.assertEqual([c.name.en for c in self.provider.cities()],
                         ["Dehradun", "Haridwar", "Rishikesh", "Nainital", "Mussoorie"])
        for c in self.provider.cities():
            self.assertTrue(c.name.hi and c.name.en)

    def test_dashboard_has_trending_headlines(self):
        dash = self.provider.dashboard()
        self.assertEqual([t.slug for t in dash.trending_news], [f"trending-{i}" for i in range(5)])
        self.assertTrue(dash.breaking_news)
        self.assertTrue(dash.latest_news_by_category)


if __name__ == '__main__':
    unittest.main()
