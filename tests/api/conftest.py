from typing import Optional

import pytest
from fastapi.testclient import TestClient

from pdf_enhancer.api import dependencies
from pdf_enhancer.api.main import create_app
from pdf_enhancer.domain.errors import ExtractionFailure
from pdf_enhancer.domain.schemas import ContentMetadata, ExtractedContent
from pdf_enhancer.llm_infrastructure.llm.base import BaseLLM, LLMResponse
from pdf_enhancer.llm_infrastructure.llm.dispatcher import ModelDispatcher
from pdf_enhancer.services.document_service import DocumentService
from pdf_enhancer.services.enhancement_service import EnhancementService
from pdf_enhancer.services.extraction_service import ContentExtractionService
from pdf_enhancer.services.rendering import BasePdfRenderer

ENHANCED_MARKDOWN = "# Key Points\n- tides are predictable\n## Outlook\nGrowing capacity."

ARTICLE_BODY = (
    "Tidal energy is generated by the rise and fall of sea levels. "
    "Unlike wind and solar, tides are predictable years in advance."
)


class FakeLLM(BaseLLM):
    provider_name = "Gemini"

    def __init__(self) -> None:
        super().__init__()
        self.prompts: list[str] = []

    def complete(self, system, prompt, **kwargs):
        self.prompts.append(prompt)
        return LLMResponse(text=ENHANCED_MARKDOWN)


class FakeExtractionService(ContentExtractionService):
    """Real text handling; URLs resolve to a canned article."""

    def __init__(self) -> None:
        super().__init__(fetcher=None)

    def from_url(self, url: str) -> ExtractedContent:
        if "missing" in url:
            raise ExtractionFailure("Failed to fetch content: 404 Not Found")
        return ExtractedContent(
            title="Tidal Energy",
            author="Jane Roe",
            content=ARTICLE_BODY,
            url=url,
            metadata=ContentMetadata(site_name="example.com"),
        )


class FakeRenderer(BasePdfRenderer):
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.last_html: Optional[str] = None

    def render(self, html: str, *, title: str = "") -> bytes:
        if self.error is not None:
            raise self.error
        self.last_html = html
        return b"%PDF-1.7\n%fake"


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def dispatcher(fake_llm) -> ModelDispatcher:
    # Only the Google group has a credential
    return ModelDispatcher(llms={"google": fake_llm})


@pytest.fixture
def client(dispatcher, fake_renderer):
    app = create_app()
    app.dependency_overrides[dependencies.get_model_dispatcher] = lambda: dispatcher
    app.dependency_overrides[dependencies.get_extraction_service] = FakeExtractionService
    app.dependency_overrides[dependencies.get_enhancement_service] = (
        lambda: EnhancementService(dispatcher)
    )
    app.dependency_overrides[dependencies.get_document_service] = (
        lambda: DocumentService(renderer=fake_renderer)
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def article_payload() -> dict:
    return {
        "title": "Tidal Energy",
        "author": "Jane Roe",
        "content": ARTICLE_BODY,
        "url": "https://example.com/tidal",
    }
