"""Request-scoped context handed to every topology operation."""
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

from src.common.errors import DEFAULT_LANGUAGE, ErrorLocalizer

# Header names shared with the object controller
HEADER_SUPPLIER_ACCOUNT = "HTTP_BLUEKING_SUPPLIER_ID"
HEADER_USER = "BK_User"
HEADER_LANGUAGE = "HTTP_BLUEKING_LANGUAGE"


class ContextParams(BaseModel):
    """Caller scope: tenant, user, language and forwarded headers."""
    supplier_account: str
    user: str = ""
    language: str = DEFAULT_LANGUAGE
    header: Dict[str, str] = Field(default_factory=dict)
    err: ErrorLocalizer

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @classmethod
    def create(
        cls,
        supplier_account: str,
        user: str = "",
        language: str = DEFAULT_LANGUAGE,
    ) -> "ContextParams":
        """Build a context and the header set forwarded downstream."""
        header = {
            HEADER_SUPPLIER_ACCOUNT: supplier_account,
            HEADER_USER: user,
            HEADER_LANGUAGE: language,
        }
        return cls(
            supplier_account=supplier_account,
            user=user,
            language=language,
            header=header,
            err=ErrorLocalizer(language),
        )
