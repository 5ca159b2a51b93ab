"""Classification API endpoints."""
from typing import Any, Dict, NoReturn, Optional

import httpx
from fastapi import APIRouter, Body, Depends, HTTPException, status

from src.api.dependencies import get_classification_operation, get_context_params
from src.common.condition import Condition
from src.common.errors import (
    CC_ERR_COMM_HTTP_DO_REQUEST_FAILED,
    CCError,
    NotFoundError,
    ValidationError,
)
from src.models.context import ContextParams
from src.services.classification_operation import ClassificationOperation
from src.utils.logging_utils import setup_logger

logger = setup_logger(__name__)
router = APIRouter()


def _raise_http(params: ContextParams, e: Exception) -> NoReturn:
    """Translate an operation error into an HTTP error response."""
    if isinstance(e, ValidationError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict())
    if isinstance(e, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    if isinstance(e, CCError):
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.to_dict())
    if isinstance(e, httpx.HTTPError):
        err = params.err.error(CC_ERR_COMM_HTTP_DO_REQUEST_FAILED)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=err.to_dict())
    raise e


@router.post("/classifications",
          status_code=status.HTTP_201_CREATED,
          description="Create a new classification",
          responses={
              201: {"description": "Classification created successfully"},
              400: {"description": "Invalid input"}
          })
async def create_classification(
    data: Dict[str, Any] = Body(...),
    params: ContextParams = Depends(get_context_params),
    operation: ClassificationOperation = Depends(get_classification_operation)
):
    """Create a new classification."""
    try:
        cls = await operation.create_classification(params, data)
    except Exception as e:
        logger.error(f"Error creating classification: {str(e)}")
        _raise_http(params, e)
    return cls.to_dict()


@router.post("/classifications/search",
          description="Search classifications by condition",
          responses={
              200: {"description": "List of matching classifications"}
          })
async def search_classifications(
    cond: Optional[Dict[str, Any]] = Body(default=None),
    params: ContextParams = Depends(get_context_params),
    operation: ClassificationOperation = Depends(get_classification_operation)
):
    """Search classifications; an empty body matches everything."""
    try:
        items = await operation.find_classification(params, Condition.from_map(cond))
    except Exception as e:
        logger.error(f"Error searching classifications: {str(e)}")
        _raise_http(params, e)
    return [item.to_dict() for item in items]


@router.get("/classifications/{classification_id}",
         description="Get a classification by its key",
         responses={
             200: {"description": "The classification"},
             404: {"description": "Classification not found"}
         })
async def get_classification(
    classification_id: str,
    params: ContextParams = Depends(get_context_params),
    operation: ClassificationOperation = Depends(get_classification_operation)
):
    """Get a single classification."""
    try:
        cls = await operation.find_single_classification(params, classification_id)
    except Exception as e:
        logger.error(f"Error getting classification: {str(e)}")
        _raise_http(params, e)
    return cls.to_dict()


@router.put("/classifications/{id}",
         description="Update a classification",
         responses={
             200: {"description": "Classification updated successfully"},
             400: {"description": "Invalid input"}
         })
async def update_classification(
    id: int,
    data: Dict[str, Any] = Body(...),
    params: ContextParams = Depends(get_context_params),
    operation: ClassificationOperation = Depends(get_classification_operation)
):
    """Update a classification."""
    cond = Condition()
    cond.field("id").eq(id)
    try:
        await operation.update_classification(params, data, id, cond)
    except Exception as e:
        logger.error(f"Error updating classification: {str(e)}")
        _raise_http(params, e)
    return {"status": "success"}


@router.delete("/classifications/{id}",
            description="Delete a classification",
            responses={
                200: {"description": "Classification deleted successfully"}
            })
async def delete_classification(
    id: int,
    cond: Optional[Dict[str, Any]] = Body(default=None),
    params: ContextParams = Depends(get_context_params),
    operation: ClassificationOperation = Depends(get_classification_operation)
):
    """Delete a classification."""
    try:
        await operation.delete_classification(params, id, None, Condition.from_map(cond))
    except Exception as e:
        logger.error(f"Error deleting classification: {str(e)}")
        _raise_http(params, e)
    return {"status": "success"}
