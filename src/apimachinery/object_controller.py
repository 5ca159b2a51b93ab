"""HTTP client for the object controller metadata service."""
from typing import Any, Dict, Optional

import httpx

from src.models.response import ResponseEnvelope
from src.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

CLASSIFICATION_PATH = "/meta/objectclassification"


class ObjectControllerClient:
    """Classification endpoints of the object controller.

    Each call returns the decoded response envelope. Transport failures and
    non-2xx statuses raise ``httpx.HTTPError`` unchanged.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def _do(
        self,
        method: str,
        path: str,
        header: Dict[str, str],
        body: Optional[Dict[str, Any]] = None,
    ) -> ResponseEnvelope:
        response = await self.client.request(method, path, headers=header, json=body)
        response.raise_for_status()
        return ResponseEnvelope.model_validate(response.json())

    async def select_classifications(
        self, header: Dict[str, str], cond: Dict[str, Any]
    ) -> ResponseEnvelope:
        return await self._do("POST", f"{CLASSIFICATION_PATH}/search", header, cond)

    async def create_classification(
        self, header: Dict[str, str], data: Dict[str, Any]
    ) -> ResponseEnvelope:
        return await self._do("POST", CLASSIFICATION_PATH, header, data)

    async def update_classification(
        self, id: int, header: Dict[str, str], data: Dict[str, Any]
    ) -> ResponseEnvelope:
        return await self._do("PUT", f"{CLASSIFICATION_PATH}/{id}", header, data)

    async def delete_classification(
        self, id: int, header: Dict[str, str], cond: Dict[str, Any]
    ) -> ResponseEnvelope:
        return await self._do("DELETE", f"{CLASSIFICATION_PATH}/{id}", header, cond)


class ClientSet:
    """Owns the shared HTTP connection pool and the service clients."""

    def __init__(self, client: httpx.AsyncClient):
        self.http_client = client
        self.object_controller = ObjectControllerClient(client)

    @classmethod
    def from_settings(cls, settings) -> "ClientSet":
        logger.info(f"Connecting to object controller at {settings.OBJECT_CONTROLLER_URL}")
        client = httpx.AsyncClient(
            base_url=settings.OBJECT_CONTROLLER_URL,
            timeout=settings.OBJECT_CONTROLLER_TIMEOUT,
        )
        return cls(client)

    async def close(self) -> None:
        await self.http_client.aclose()
