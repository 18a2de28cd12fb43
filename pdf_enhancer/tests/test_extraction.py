"""Page fetching, HTML parsing and the extraction service."""

from __future__ import annotations

import httpx
import pytest

from pdf_enhancer.config.settings import ExtractionSettings
from pdf_enhancer.domain.errors import ExtractionFailure, ValidationError
from pdf_enhancer.services.extraction_service import (
    TEXT_INPUT_AUTHOR,
    TEXT_INPUT_TITLE,
    ContentExtractionService,
)
from pdf_enhancer.services.ingest import PageFetcher, extract_metadata, extract_readable_text

BODY = "Tidal turbines convert the kinetic energy of moving water into electricity. " * 4

ARTICLE_HTML = f"""<html>
<head>
  <title> Tidal   Power </title>
  <meta name="description" content="All about tides">
  <meta name="author" content="Jane Roe">
  <meta property="article:published_time" content="2024-03-01T10:00:00Z">
  <meta property="og:image" content="https://example.com/t.png">
  <script>var tracking = 1;</script>
</head>
<body>
  <nav>Home | About</nav>
  <article>
    <h1>Tidal Power</h1>
    <p>{BODY}</p>
    <script>alert('x')</script>
    <style>.x {{ color: red }}</style>
  </article>
  <footer>Copyright</footer>
</body>
</html>"""


def _fetcher(handler) -> PageFetcher:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return PageFetcher(user_agent="test-agent", client=client)


def _service(handler) -> ContentExtractionService:
    return ContentExtractionService(
        fetcher=_fetcher(handler),
        settings=ExtractionSettings(_env_file=None),
    )


# ─── Parser ───


def test_metadata_priority_and_site_fallback():
    meta = extract_metadata(ARTICLE_HTML, "https://news.example.com/tides")
    assert meta.title == "Tidal Power"
    assert meta.author == "Jane Roe"
    assert meta.published_date == "2024-03-01T10:00:00Z"
    assert meta.description == "All about tides"
    assert meta.image == "https://example.com/t.png"
    assert meta.site_name == "news.example.com"


def test_metadata_defaults():
    meta = extract_metadata("<html><body><p>hi</p></body></html>")
    assert meta.title == "Untitled"
    assert meta.author is None
    assert meta.site_name is None


def test_readable_text_prefers_article_and_drops_scripts():
    text = extract_readable_text(ARTICLE_HTML)
    assert text.startswith("Tidal Power Tidal turbines")
    assert "alert" not in text
    assert "color: red" not in text
    assert "Home | About" not in text
    assert "  " not in text


def test_readable_text_falls_back_to_body():
    html = f"<html><body><div>{BODY}</div><article>short</article></body></html>"
    text = extract_readable_text(html)
    assert text.startswith("Tidal turbines")
    assert text.endswith("short")


# ─── Fetcher ───


def test_fetch_sends_user_agent():
    seen = {}

    def handler(request: httpx.Request):
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200, text=ARTICLE_HTML)

    page = _fetcher(handler).fetch("https://example.com/a")
    assert seen["ua"] == "test-agent"
    assert page.url == "https://example.com/a"
    assert "<article>" in page.html


def test_fetch_non_success_status():
    fetcher = _fetcher(lambda request: httpx.Response(404))
    with pytest.raises(ExtractionFailure, match="Failed to fetch content: 404 Not Found"):
        fetcher.fetch("https://example.com/missing")


def test_fetch_transport_error():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(ExtractionFailure) as exc_info:
        _fetcher(handler).fetch("https://example.com/slow")
    assert exc_info.value.stage == "extraction"


# ─── Service ───


def test_extract_from_url():
    service = _service(lambda request: httpx.Response(200, text=ARTICLE_HTML))
    content = service.extract(url="https://news.example.com/tides")

    assert content.title == "Tidal Power"
    assert content.author == "Jane Roe"
    assert content.url == "https://news.example.com/tides"
    assert content.metadata.site_name == "news.example.com"
    assert len(content.content) >= 100


def test_extract_prefers_text_over_url():
    def handler(request):
        raise AssertionError("network must not be used for text input")

    text = "A sufficiently long piece of user text that easily passes the minimum."
    content = _service(handler).extract(url="https://example.com", text=text)

    assert content.title == TEXT_INPUT_TITLE
    assert content.author == TEXT_INPUT_AUTHOR
    assert content.url is None
    assert content.content == text
    assert content.published_date


def test_extract_requires_input():
    with pytest.raises(ValidationError, match="Either URL or text content is required"):
        _service(lambda request: httpx.Response(200)).extract()


def test_extract_rejects_short_text():
    with pytest.raises(ValidationError, match="at least 50 characters"):
        _service(lambda request: httpx.Response(200)).extract(text="too short")


def test_extract_rejects_bad_url():
    with pytest.raises(ValidationError, match="Invalid URL format"):
        _service(lambda request: httpx.Response(200)).extract(url="ftp://example.com/file")


def test_extract_thin_page_fails():
    service = _service(lambda request: httpx.Response(200, text="<html><body>tiny</body></html>"))
    with pytest.raises(ExtractionFailure, match="Could not extract meaningful content"):
        service.extract(url="https://example.com/thin")
