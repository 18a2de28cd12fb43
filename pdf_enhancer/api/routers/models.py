"""Model catalog API."""

from fastapi import APIRouter, Depends

from pdf_enhancer.api.dependencies import get_model_dispatcher
from pdf_enhancer.api.preflight import preflight_response
from pdf_enhancer.api.schemas import APIResponse, ModelCatalogResponse
from pdf_enhancer.llm_infrastructure.llm import ModelDispatcher

router = APIRouter(tags=["Models"])


@router.get("/models", response_model=APIResponse[ModelCatalogResponse])
async def list_models(dispatcher: ModelDispatcher = Depends(get_model_dispatcher)):
    """Selectable models with per-provider availability."""
    return APIResponse[ModelCatalogResponse](
        success=True,
        data=ModelCatalogResponse(
            availability=dispatcher.availability(),
            models=dispatcher.list_models(),
        ),
    )


@router.options("/models", include_in_schema=False)
async def models_options():
    return preflight_response("GET")
