"""
Tests for article scraping (no network: httpx.MockTransport)
"""

import asyncio

import httpx
import pytest

from app.core.errors import (
    AccessDeniedError,
    PageNotFoundError,
    ScrapeFailedError,
    ScrapeTimeoutError,
)
from app.integrations.article_scraper import extract_article_text, scrape_article


ARTICLE_BODY = "Sustainable web development cuts hosting costs. " * 12

ARTICLE_HTML = f"""
<html>
  <head><title>t</title><script>tracking()</script></head>
  <body>
    <nav>Home | About</nav>
    <article><h1>Green code</h1><p>{ARTICLE_BODY}</p></article>
    <footer>Copyright</footer>
  </body>
</html>
"""


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _scrape(handler, url="https://example.com/post"):
    async def run():
        async with _client(handler) as client:
            return await scrape_article(url, client=client)

    return asyncio.run(run())


class TestExtractArticleText:
    """Tests for extract_article_text."""

    def test_prefers_article_element(self):
        text = extract_article_text(ARTICLE_HTML)
        assert text.startswith("Green code")
        assert "Home | About" not in text
        assert "Copyright" not in text
        assert "tracking" not in text

    def test_falls_back_to_body(self):
        html = "<html><body><div>Short page text</div><footer>f</footer></body></html>"
        assert extract_article_text(html) == "Short page text"

    def test_short_article_element_skipped(self):
        html = "<html><body><article>tiny</article><p>outside</p></body></html>"
        assert extract_article_text(html) == "tiny outside"


class TestScrapeArticle:
    """Tests for scrape_article."""

    def test_success(self):
        def handler(request):
            return httpx.Response(200, text=ARTICLE_HTML, headers={"content-type": "text/html; charset=utf-8"})

        content = _scrape(handler)
        assert "Sustainable web development" in content
        assert "\n" not in content

    @pytest.mark.parametrize("status", [401, 403])
    def test_access_denied(self, status):
        with pytest.raises(AccessDeniedError):
            _scrape(lambda request: httpx.Response(status))

    def test_not_found(self):
        with pytest.raises(PageNotFoundError):
            _scrape(lambda request: httpx.Response(404))

    def test_server_error(self):
        with pytest.raises(ScrapeFailedError):
            _scrape(lambda request: httpx.Response(500))

    def test_non_html(self):
        def handler(request):
            return httpx.Response(200, json={"a": 1})

        with pytest.raises(ScrapeFailedError):
            _scrape(handler)

    def test_too_little_content(self):
        def handler(request):
            return httpx.Response(200, text="<html><body>hi</body></html>", headers={"content-type": "text/html"})

        with pytest.raises(ScrapeFailedError):
            _scrape(handler)

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(ScrapeTimeoutError):
            _scrape(handler)
