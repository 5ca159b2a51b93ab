"""Error codes and exception types for topology operations."""
from typing import Dict


CC_SUCCESS = 0

CC_ERR_COMM_HTTP_DO_REQUEST_FAILED = 1199001
CC_ERR_COMM_PARAMS_INVALID = 1199006
CC_ERR_COMM_PARAMS_NEED_SET = 1199007

CC_ERR_TOPO_OBJECT_CLASSIFICATION_CREATE_FAILED = 1101009
CC_ERR_TOPO_OBJECT_CLASSIFICATION_DELETE_FAILED = 1101010
CC_ERR_TOPO_OBJECT_CLASSIFICATION_SELECT_FAILED = 1101011
CC_ERR_TOPO_OBJECT_CLASSIFICATION_UPDATE_FAILED = 1101012

DEFAULT_LANGUAGE = "en"

_MESSAGES: Dict[str, Dict[int, str]] = {
    "en": {
        CC_SUCCESS: "success",
        CC_ERR_COMM_HTTP_DO_REQUEST_FAILED: "failed to request the remote service",
        CC_ERR_COMM_PARAMS_INVALID: "parameter {} is invalid",
        CC_ERR_COMM_PARAMS_NEED_SET: "parameter {} must be set",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_CREATE_FAILED: "failed to create the classification",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_DELETE_FAILED: "failed to delete the classification",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_SELECT_FAILED: "failed to find the classification",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_UPDATE_FAILED: "failed to update the classification",
    },
    "zh-cn": {
        CC_SUCCESS: "成功",
        CC_ERR_COMM_HTTP_DO_REQUEST_FAILED: "请求远程服务失败",
        CC_ERR_COMM_PARAMS_INVALID: "参数 {} 无效",
        CC_ERR_COMM_PARAMS_NEED_SET: "参数 {} 必须设置",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_CREATE_FAILED: "新建分类失败",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_DELETE_FAILED: "删除分类失败",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_SELECT_FAILED: "查询分类失败",
        CC_ERR_TOPO_OBJECT_CLASSIFICATION_UPDATE_FAILED: "更新分类失败",
    },
}

_UNKNOWN = {
    "en": "unknown error code {}",
    "zh-cn": "未知错误码 {}",
}


class CCError(Exception):
    """Error carrying a numeric code and a caller-facing message."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"bk_error_code": self.code, "bk_error_msg": self.message}


class NotFoundError(CCError):
    """Raised when a single-result lookup matched nothing."""
    pass


class ValidationError(CCError):
    """Raised when caller data cannot be parsed into a classification."""
    pass


class RemoteError(CCError):
    """Raised when the object controller answered with a failure code."""
    pass


class ErrorLocalizer:
    """Maps error codes to messages in the caller's language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        language = (language or DEFAULT_LANGUAGE).lower()
        self.language = language if language in _MESSAGES else DEFAULT_LANGUAGE

    def message(self, code: int, *args) -> str:
        """Return the localized text for code.

        Falls back to English, then to a generic unknown-code message.
        """
        text = _MESSAGES[self.language].get(code)
        if text is None:
            text = _MESSAGES[DEFAULT_LANGUAGE].get(code)
        if text is None:
            return _UNKNOWN[self.language].format(code)
        return text.format(*args) if args else text

    def error(self, code: int, *args, error_cls=CCError) -> CCError:
        """Build an exception of error_cls for code with a localized message."""
        return error_cls(code, self.message(code, *args))
