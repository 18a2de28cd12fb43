"""Content enhancement API."""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from pdf_enhancer.api.dependencies import get_enhancement_service
from pdf_enhancer.api.preflight import preflight_response
from pdf_enhancer.api.schemas import APIResponse, EnhanceRequest
from pdf_enhancer.domain.schemas import EnhancedContent
from pdf_enhancer.services.enhancement_service import EnhancementService

router = APIRouter(tags=["Enhancement"])


@router.post(
    "/enhance",
    response_model=APIResponse[EnhancedContent],
    response_model_exclude_none=True,
)
async def enhance_content(
    body: EnhanceRequest,
    service: EnhancementService = Depends(get_enhancement_service),
):
    """Summarize, expand or validate content with the selected model."""
    enhanced = await run_in_threadpool(service.enhance, body.content, body.options)
    return APIResponse[EnhancedContent](success=True, data=enhanced)


@router.options("/enhance", include_in_schema=False)
async def enhance_options():
    return preflight_response("POST")
