"""Service layer for classification operations.

The operation façade turns caller intent into object controller calls and
maps envelopes back into classifications or errors.
"""
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from src.common.condition import Condition
from src.common.errors import (
    CC_ERR_COMM_PARAMS_NEED_SET,
    CC_ERR_TOPO_OBJECT_CLASSIFICATION_SELECT_FAILED,
    NotFoundError,
    RemoteError,
    ValidationError,
)
from src.models.classification import FIELD_CLASSIFICATION_ID, FIELD_ID, Classification
from src.models.context import ContextParams
from src.models.factory import ModelFactory
from src.utils.logging_utils import setup_logger

logger = setup_logger(__name__)


class ClassificationOperation:
    """CRUD operations for classifications."""

    def __init__(self, client_set, model_factory: ModelFactory):
        """Initialize with the client set and the model factory."""
        self.client_set = client_set
        self.model_factory = model_factory

    async def find_single_classification(
        self, params: ContextParams, classification_id: str
    ) -> Classification:
        """Return the first classification whose key is classification_id.

        Raises:
            NotFoundError: if nothing matches
        """
        if not classification_id:
            logger.error(
                f"[operation-cls] failed to find the supplier account({params.supplier_account}) "
                "classification, the classification id is empty"
            )
            raise params.err.error(
                CC_ERR_COMM_PARAMS_NEED_SET, FIELD_CLASSIFICATION_ID, error_cls=ValidationError
            )

        cond = Condition()
        cond.field(FIELD_CLASSIFICATION_ID).eq(classification_id)

        try:
            items = await self.find_classification(params, cond)
        except Exception as e:
            logger.error(
                f"[operation-cls] failed to find the supplier account({params.supplier_account}) "
                f"classification({classification_id}), error info is {str(e)}"
            )
            raise

        if not items:
            logger.error(
                f"[operation-cls] failed to find the supplier account({params.supplier_account}) "
                f"classification({classification_id}), error info is no classification matched"
            )
            raise params.err.error(
                CC_ERR_TOPO_OBJECT_CLASSIFICATION_SELECT_FAILED, error_cls=NotFoundError
            )
        return items[0]

    async def create_classification(
        self, params: ContextParams, data: Dict[str, Any]
    ) -> Classification:
        """Parse data into a new classification and persist it."""
        cls = self.model_factory.create_classification(params)

        try:
            cls.parse(data)
        except ValidationError as e:
            logger.error(f"[operation-cls] failed to parse the params, error info is {e.message}")
            raise

        try:
            await cls.create()
        except Exception as e:
            logger.error(f"[operation-cls] failed to save the classification({cls!r}), error info is {str(e)}")
            raise

        return cls

    async def delete_classification(
        self,
        params: ContextParams,
        id: int,
        data: Optional[Dict[str, Any]],
        cond: Condition,
    ) -> None:
        """Delete the classification identified by id, scoped by cond."""
        try:
            rsp = await self.client_set.object_controller.delete_classification(
                id, params.header, cond.to_map()
            )
        except Exception as e:
            logger.error(f"[operation-cls] failed to request the object controller, error info is {str(e)}")
            raise

        if not rsp.is_success:
            logger.error(f"[operation-cls] failed to delete the classification({id}), error info is {rsp.message}")
            raise params.err.error(rsp.code, error_cls=RemoteError)

    async def find_classification(
        self, params: ContextParams, cond: Condition
    ) -> List[Classification]:
        """Return every classification matching cond, in remote order."""
        cond_map = cond.to_map()
        scope = "all" if cond.is_empty() else f"the condition({cond_map})"
        try:
            rsp = await self.client_set.object_controller.select_classifications(
                params.header, cond_map
            )
        except Exception as e:
            logger.error(f"[operation-cls] failed to request the object controller, error info is {str(e)}")
            raise

        if not rsp.is_success:
            logger.error(
                f"[operation-cls] failed to search the classification by {scope}, "
                f"error info is {rsp.message}"
            )
            raise params.err.error(rsp.code, error_cls=RemoteError)

        try:
            return self.model_factory.create_classifications(params, self.client_set, rsp.records())
        except PydanticValidationError as e:
            logger.error(
                f"[operation-cls] failed to read the classifications searched by {scope}, "
                f"error info is {str(e)}"
            )
            raise params.err.error(
                CC_ERR_TOPO_OBJECT_CLASSIFICATION_SELECT_FAILED, error_cls=RemoteError
            ) from e

    async def update_classification(
        self,
        params: ContextParams,
        data: Dict[str, Any],
        id: int,
        cond: Condition,
    ) -> None:
        """Update the classification identified by id with data.

        The id is merged into the data and is the only selector; cond is
        not applied.
        """
        cls = self.model_factory.create_classification(params)
        payload = dict(data or {})
        payload[FIELD_ID] = id

        try:
            cls.parse(payload)
        except ValidationError as e:
            logger.error(f"[operation-cls] failed to parse the params, error info is {e.message}")
            raise

        try:
            await cls.update()
        except Exception as e:
            logger.error(f"[operation-cls] failed to update the classification({cls!r}), error info is {str(e)}")
            raise
