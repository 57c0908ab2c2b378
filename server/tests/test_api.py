"""
Tests for HTTP endpoints
"""

from app.core.config import settings
from app.core.errors import ScrapeTimeoutError


SUMMARY_TEXT = "This article explains how sustainable web development lowers hosting costs for businesses."

RAW_NOTES = """Key Takeaways
* Green hosting is now price-competitive
* Efficient code lowers server load

Main Points
1. Cost savings
hosting bills drop after optimization
2. Performance
Supporting Details
- Case study: 35% lower hosting costs
Action Items
- Audit page weight
Summary
* Sustainability and performance go together
"""

RAW_SUMMARY = """This article covers **sustainable web development** and why it matters.

## Key Points
- Lower server costs
## Main Content
Efficient code reduces resource usage.
## Important Details
- Load time fell from 3.2s to 1.8s
# Takeaways
- Green hosting pays off
"""


class TestNotesEndpoint:
    """POST /api/notes"""

    def test_generates_formatted_notes(self, client, fake_provider):
        fake_provider.output = RAW_NOTES

        response = client.post("/api/notes", json={"summary": SUMMARY_TEXT})

        assert response.status_code == 200
        data = response.json()
        assert data["has_proper_formatting"] is True
        assert data["format_details"]["score"] == 100
        assert "1. **Cost savings**\n   - hosting bills drop after optimization" in data["result"]
        assert data["result"].startswith("## Key Takeaways\n")
        assert SUMMARY_TEXT in fake_provider.calls[0][1]

    def test_repairs_missing_anchor_sections(self, client, fake_provider):
        fake_provider.output = RAW_NOTES.replace("Key Takeaways\n", "Overview\n")

        response = client.post("/api/notes", json={"summary": SUMMARY_TEXT})

        data = response.json()
        assert response.status_code == 200
        assert data["result"].startswith("## Key Takeaways\n* Key insight from the content\n")
        assert data["has_proper_formatting"] is True

    def test_reports_unrepairable_structure(self, client, fake_provider):
        fake_provider.output = "Plain prose about the article without any structure at all. " * 3

        response = client.post("/api/notes", json={"summary": SUMMARY_TEXT})

        data = response.json()
        assert response.status_code == 200
        assert data["has_proper_formatting"] is False
        assert "## Main Points" in data["format_details"]["missing_sections"]

    def test_summary_too_short(self, client, fake_provider):
        response = client.post("/api/notes", json={"summary": "  too short  "})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "CONTENT_TOO_SHORT"
        assert fake_provider.calls == []

    def test_summary_too_long(self, client, fake_provider):
        response = client.post("/api/notes", json={"summary": "x" * (settings.NOTES_MAX_INPUT_CHARS + 1)})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "CONTENT_TOO_LONG"

    def test_generated_content_too_short(self, client, fake_provider):
        fake_provider.output = "## Summary\n* tiny"
        response = client.post("/api/notes", json={"summary": SUMMARY_TEXT})
        assert response.status_code == 400

    def test_empty_generation(self, client, fake_provider):
        fake_provider.output = "   "
        response = client.post("/api/notes", json={"summary": SUMMARY_TEXT})
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "COMPLETION_FAILED"

    def test_rate_limited(self, client, fake_provider):
        for _ in range(settings.NOTES_RATE_LIMIT):
            client.post("/api/notes", json={"summary": "short"})

        response = client.post("/api/notes", json={"summary": "short"})

        assert response.status_code == 429
        assert response.json()["error"]["code"] == "RATE_LIMITED"


class TestSummarizeEndpoint:
    """POST /api/summarize"""

    def test_summarizes_article(self, client, fake_provider, monkeypatch):
        async def fake_scrape(url):
            return "Scraped article text. " * 10

        monkeypatch.setattr("app.api.summarize.scrape_article", fake_scrape)
        fake_provider.output = RAW_SUMMARY

        response = client.post("/api/summarize", json={"url": "https://example.com/post"})

        assert response.status_code == 200
        data = response.json()
        assert data["url"] == "https://example.com/post"
        assert data["structure_validation"]["is_valid"] is True
        assert "\n\n## Key Points\n- Lower server costs\n" in data["summary"]
        assert "## Takeaways" in data["summary"]
        assert "Scraped article text." in fake_provider.calls[0][1]

    def test_invalid_url(self, client, fake_provider):
        response = client.post("/api/summarize", json={"url": "ftp://example.com"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_URL"

    def test_scrape_error_is_mapped(self, client, fake_provider, monkeypatch):
        async def slow_scrape(url):
            raise ScrapeTimeoutError(url, 10)

        monkeypatch.setattr("app.api.summarize.scrape_article", slow_scrape)

        response = client.post("/api/summarize", json={"url": "https://example.com/slow"})

        assert response.status_code == 408
        assert response.json()["error"]["code"] == "SCRAPE_TIMEOUT"


class TestDocumentEndpoints:
    """Model-free formatting and rendering endpoints."""

    def test_format(self, client):
        response = client.post("/api/format", json={"content": "just plain text", "template": "notes"})

        assert response.status_code == 200
        data = response.json()
        assert data["repaired"] is True
        assert data["validation"]["is_valid"] is False
        assert data["document"].startswith("## Key Takeaways\n")

    def test_format_unknown_template(self, client):
        response = client.post("/api/format", json={"content": "x", "template": "poem"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "UNKNOWN_TEMPLATE"

    def test_render(self, client):
        response = client.post("/api/render", json={"content": "## Summary\n* **bold** rest\n"})

        assert response.status_code == 200
        blocks = response.json()["blocks"]
        assert blocks[0]["kind"] == "header"
        assert blocks[0]["icon"] == "closing"
        assert blocks[1]["spans"] == [
            {"text": "bold", "is_bold": True},
            {"text": " rest", "is_bold": False},
        ]

    def test_templates(self, client):
        response = client.get("/api/templates")
        names = [t["name"] for t in response.json()["templates"]]
        assert names == ["notes", "summary"]

    def test_health(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
