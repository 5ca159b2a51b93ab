"""Response envelope returned by the object controller."""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.common.errors import CC_SUCCESS


class ResponseEnvelope(BaseModel):
    """Wrapper around every object controller answer."""
    result: bool = True
    code: int = Field(default=CC_SUCCESS, alias="bk_error_code")
    message: str = Field(default="", alias="bk_error_msg")
    data: Any = None

    model_config = ConfigDict(populate_by_name=True)

    @property
    def is_success(self) -> bool:
        return self.code == CC_SUCCESS

    def records(self) -> List[dict]:
        """Return the raw records carried by a search payload.

        Accepts a bare list or a ``{"count": n, "info": [...]}`` page.
        """
        if not self.data:
            return []
        if isinstance(self.data, dict):
            return list(self.data.get("info") or [])
        return list(self.data)

    def created_id(self) -> Optional[int]:
        """Return the identifier assigned by a create call, if any."""
        if isinstance(self.data, dict):
            return self.data.get("id")
        return None
