"""PDF generation API."""

from fastapi import APIRouter, Depends, Response

from pdf_enhancer.api.dependencies import get_document_service
from pdf_enhancer.api.preflight import preflight_response
from pdf_enhancer.domain.schemas import PDFGenerationRequest
from pdf_enhancer.services.document_service import DocumentService

router = APIRouter(tags=["Documents"])


# Plain def: FastAPI runs it in a worker thread, which the sync Playwright API needs.
@router.post(
    "/generate-pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def generate_pdf(
    body: PDFGenerationRequest,
    service: DocumentService = Depends(get_document_service),
):
    """Render enhanced content as a downloadable PDF."""
    document = service.generate(body)
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )


@router.options("/generate-pdf", include_in_schema=False)
async def generate_pdf_options():
    return preflight_response("POST")
