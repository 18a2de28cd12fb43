"""Content extraction API."""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from pdf_enhancer.api.dependencies import get_extraction_service
from pdf_enhancer.api.preflight import preflight_response
from pdf_enhancer.api.schemas import APIResponse, ExtractRequest
from pdf_enhancer.domain.schemas import ExtractedContent
from pdf_enhancer.services.extraction_service import ContentExtractionService

router = APIRouter(tags=["Extraction"])


@router.post(
    "/extract",
    response_model=APIResponse[ExtractedContent],
    response_model_exclude_none=True,
)
async def extract_content(
    body: ExtractRequest,
    service: ContentExtractionService = Depends(get_extraction_service),
):
    """Extract readable content from a URL, or wrap raw text."""
    content = await run_in_threadpool(service.extract, url=body.url, text=body.text)
    return APIResponse[ExtractedContent](success=True, data=content)


@router.options("/extract", include_in_schema=False)
async def extract_options():
    return preflight_response("POST")
