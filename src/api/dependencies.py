"""FastAPI dependency injection."""

from typing import Optional
from fastapi import Depends, Header, Request
from src.apimachinery.object_controller import ClientSet
from src.config.config import settings
from src.models.context import (
    HEADER_LANGUAGE,
    HEADER_SUPPLIER_ACCOUNT,
    HEADER_USER,
    ContextParams,
)
from src.models.factory import ModelFactory
from src.services.classification_operation import ClassificationOperation

async def get_client_set(request: Request) -> ClientSet:
    """Get the object controller client set from app state."""
    return request.app.state.client_set

async def get_context_params(
    supplier_account: Optional[str] = Header(default=None, alias=HEADER_SUPPLIER_ACCOUNT, convert_underscores=False),
    user: Optional[str] = Header(default=None, alias=HEADER_USER, convert_underscores=False),
    language: Optional[str] = Header(default=None, alias=HEADER_LANGUAGE, convert_underscores=False),
) -> ContextParams:
    """Build the request context from the caller's headers."""
    return ContextParams.create(
        supplier_account=supplier_account or settings.DEFAULT_SUPPLIER_ACCOUNT,
        user=user or "",
        language=language or settings.DEFAULT_LANGUAGE,
    )

async def get_model_factory(
    client_set: ClientSet = Depends(get_client_set)
) -> ModelFactory:
    """Get model factory instance."""
    return ModelFactory(client_set)

async def get_classification_operation(
    client_set: ClientSet = Depends(get_client_set),
    model_factory: ModelFactory = Depends(get_model_factory)
) -> ClassificationOperation:
    """Get classification operation instance."""
    return ClassificationOperation(client_set, model_factory)
