"""Classification model for grouping object model definitions."""
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from src.common.errors import (
    CC_ERR_COMM_PARAMS_INVALID,
    CC_ERR_COMM_PARAMS_NEED_SET,
    RemoteError,
    ValidationError,
)
from src.models.context import ContextParams
from src.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

FIELD_ID = "id"
FIELD_CLASSIFICATION_ID = "bk_classification_id"
FIELD_CLASSIFICATION_NAME = "bk_classification_name"
FIELD_CLASSIFICATION_TYPE = "bk_classification_type"
FIELD_CLASSIFICATION_ICON = "bk_classification_icon"
FIELD_SUPPLIER_ACCOUNT = "bk_supplier_account"

CLASSIFICATION_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_]{1,32}$")
MAX_NAME_LENGTH = 128


class ClassificationRecord(BaseModel):
    """Typed fields of one classification.

    Every field is optional so the same record serves both create and
    partial update payloads. Records materialized from the object controller
    are validated with ``context={"trusted": True}`` which skips the format
    checks applied to caller input.
    """
    id: Optional[int] = None
    classification_id: Optional[str] = Field(default=None, alias=FIELD_CLASSIFICATION_ID)
    name: Optional[str] = Field(default=None, alias=FIELD_CLASSIFICATION_NAME)
    type: Optional[str] = Field(default=None, alias=FIELD_CLASSIFICATION_TYPE)
    icon: Optional[str] = Field(default=None, alias=FIELD_CLASSIFICATION_ICON)
    supplier_account: Optional[str] = Field(default=None, alias=FIELD_SUPPLIER_ACCOUNT)

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": 1,
                "bk_classification_id": "bk_host_manage",
                "bk_classification_name": "Host",
                "bk_classification_type": "inner",
                "bk_classification_icon": "icon-cc-host",
                "bk_supplier_account": "0"
            }
        }
    )

    @field_validator("classification_id")
    @classmethod
    def validate_classification_id(cls, v: Optional[str], info: ValidationInfo):
        if v is None or (info.context or {}).get("trusted"):
            return v
        if not CLASSIFICATION_ID_PATTERN.match(v):
            raise ValueError("must be 1-32 letters, digits or underscores")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str], info: ValidationInfo):
        if v is None or (info.context or {}).get("trusted"):
            return v
        if not v.strip():
            raise ValueError("must not be blank")
        if len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"must be at most {MAX_NAME_LENGTH} characters")
        return v


class Classification:
    """A classification bound to the caller's context and the client set.

    Instances start empty (from the factory), get populated by ``parse`` or
    by materializing a remote record, and persist themselves through the
    object controller with ``create`` and ``update``.
    """

    def __init__(self, params: ContextParams, client_set, record: Optional[ClassificationRecord] = None):
        self.params = params
        self.client_set = client_set
        self.record = record or ClassificationRecord()

    def __repr__(self) -> str:
        return f"Classification({self.to_map()!r})"

    @property
    def id(self) -> Optional[int]:
        return self.record.id

    @property
    def classification_id(self) -> Optional[str]:
        return self.record.classification_id

    @property
    def name(self) -> Optional[str]:
        return self.record.name

    @property
    def type(self) -> Optional[str]:
        return self.record.type

    @property
    def icon(self) -> Optional[str]:
        return self.record.icon

    @property
    def supplier_account(self) -> Optional[str]:
        return self.record.supplier_account

    def parse(self, data: Dict[str, Any]) -> ClassificationRecord:
        """Validate caller data into typed fields.

        Raises:
            ValidationError: if a field has the wrong type or format
        """
        try:
            self.record = ClassificationRecord.model_validate(data or {})
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "data"
            logger.error(f"[model-cls] failed to parse the field {field}: {first['msg']}")
            raise self.params.err.error(
                CC_ERR_COMM_PARAMS_INVALID, field, error_cls=ValidationError
            ) from e
        return self.record

    def to_map(self) -> Dict[str, Any]:
        """Return the wire form, leaving out fields that were never set."""
        return self.record.model_dump(by_alias=True, exclude_unset=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form with every field."""
        return self.record.model_dump(by_alias=True)

    def _require(self, *fields: str) -> None:
        data = self.to_map()
        for field in fields:
            if data.get(field) in (None, ""):
                raise self.params.err.error(
                    CC_ERR_COMM_PARAMS_NEED_SET, field, error_cls=ValidationError
                )

    def _raise_remote(self, action: str, rsp) -> None:
        logger.error(
            f"[model-cls] failed to {action} the classification({self.to_map()}), "
            f"error info is {rsp.message}"
        )
        raise self.params.err.error(rsp.code, error_cls=RemoteError)

    async def create(self) -> None:
        """Persist a new classification and record the assigned id."""
        self._require(FIELD_CLASSIFICATION_ID, FIELD_CLASSIFICATION_NAME)
        data = self.to_map()
        if not data.get(FIELD_SUPPLIER_ACCOUNT):
            data[FIELD_SUPPLIER_ACCOUNT] = self.params.supplier_account
            self.record = ClassificationRecord.model_validate(data)

        rsp = await self.client_set.object_controller.create_classification(
            self.params.header, data
        )
        if not rsp.is_success:
            self._raise_remote("create", rsp)

        created_id = rsp.created_id()
        if created_id is not None:
            self.record = ClassificationRecord.model_validate({**data, FIELD_ID: created_id})

    async def update(self) -> None:
        """Submit the set fields of this classification as an update."""
        self._require(FIELD_ID)
        rsp = await self.client_set.object_controller.update_classification(
            self.id, self.params.header, self.to_map()
        )
        if not rsp.is_success:
            self._raise_remote("update", rsp)


def materialize(params: ContextParams, client_set, records: List[Dict[str, Any]]) -> List[Classification]:
    """Build read-side classifications from raw object controller records."""
    return [
        Classification(
            params,
            client_set,
            ClassificationRecord.model_validate(item, context={"trusted": True}),
        )
        for item in records
    ]
