"""Liveness endpoint."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from pdf_enhancer.api.dependencies import get_model_dispatcher
from pdf_enhancer.llm_infrastructure.llm import ModelDispatcher

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    providers: list[str]


@router.get("", response_model=HealthResponse)
async def health_check(
    request: Request,
    dispatcher: ModelDispatcher = Depends(get_model_dispatcher),
):
    """Liveness plus the provider groups that have credentials."""
    configured = [group for group, ok in dispatcher.availability().items() if ok]
    return HealthResponse(status="ok", version=request.app.version, providers=configured)
