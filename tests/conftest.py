"""Shared fixtures for classification tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock
from typing import Any, Optional
from httpx import AsyncClient, ASGITransport

from src.api.dependencies import get_client_set
from src.common.errors import CC_SUCCESS
from src.main import app
from src.models.context import ContextParams
from src.models.factory import ModelFactory
from src.models.response import ResponseEnvelope
from src.services.classification_operation import ClassificationOperation


@pytest.fixture
def params():
    """Context of an English-speaking admin in supplier account 0."""
    return ContextParams.create(supplier_account="0", user="admin", language="en")


@pytest.fixture
def envelope():
    """Helper to create object controller response envelopes."""
    def _create(code: int = CC_SUCCESS, data: Any = None, message: Optional[str] = None) -> ResponseEnvelope:
        return ResponseEnvelope(
            result=code == CC_SUCCESS,
            bk_error_code=code,
            bk_error_msg=message if message is not None else ("success" if code == CC_SUCCESS else "remote failure"),
            data=data,
        )
    return _create


@pytest.fixture
def mock_client_set(envelope):
    """Client set whose object controller calls are AsyncMocks returning success."""
    client_set = MagicMock()
    controller = MagicMock()
    controller.select_classifications = AsyncMock(return_value=envelope(data=[]))
    controller.create_classification = AsyncMock(return_value=envelope(data={"id": 1}))
    controller.update_classification = AsyncMock(return_value=envelope())
    controller.delete_classification = AsyncMock(return_value=envelope())
    client_set.object_controller = controller
    return client_set


@pytest.fixture
def operation(mock_client_set):
    """Classification operation wired to the mocked client set."""
    return ClassificationOperation(mock_client_set, ModelFactory(mock_client_set))


@pytest.fixture
def record_factory():
    """Helper to create raw object controller classification records."""
    def _create(id: int = 1, classification_id: str = "bk_host_manage", name: str = "Host") -> dict:
        return {
            "id": id,
            "bk_classification_id": classification_id,
            "bk_classification_name": name,
            "bk_classification_type": "inner",
            "bk_classification_icon": "icon-cc-host",
            "bk_supplier_account": "0",
        }
    return _create


@pytest.fixture(autouse=True)
def reset_app_state():
    """Reset dependency overrides around each test."""
    app.dependency_overrides = {}
    yield
    app.dependency_overrides = {}


@pytest.fixture
async def async_client(mock_client_set):
    """Async test client with the object controller replaced by mocks.

    ASGITransport does not run the lifespan, so the client set dependency
    is overridden instead of opening a real connection pool.
    """
    app.dependency_overrides[get_client_set] = lambda: mock_client_set
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
