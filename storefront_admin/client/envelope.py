"""
统一响应结构
所有客户端调用都返回 ApiResponse：成功 {ok, data, message} 或失败 {ok, message, error_code, field_errors}
"""
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.logger import get_logger

logger = get_logger("api.envelope")

T = TypeVar("T")

NETWORK_ERROR_MESSAGE = "Network error"
REQUEST_FAILED_MESSAGE = "Request failed"
NO_BASE_URL_MESSAGE = "API base URL is not configured"


class FieldError(BaseModel):
    """字段级校验错误"""
    path: List[str] = Field(default_factory=list)
    message: str

    @field_validator("path", mode="before")
    @classmethod
    def _stringify_path(cls, value: Any) -> List[str]:
        # 后端路径里可能混有数组下标
        if value is None:
            return []
        if isinstance(value, (str, int)):
            value = [value]
        return [str(segment) for segment in value]

    @classmethod
    def parse_list(cls, raw: Any) -> Optional[List["FieldError"]]:
        """解析后端 errors 字段，忽略格式不正确的条目"""
        if not isinstance(raw, list):
            return None

        errors = []
        for item in raw:
            if isinstance(item, dict) and item.get("message"):
                errors.append(cls(path=item.get("path"), message=str(item["message"])))
            elif isinstance(item, str):
                errors.append(cls(message=item))
        return errors or None


class ApiError(Exception):
    """失败响应对应的异常，仅在调用方显式使用 raise_for_failure 时抛出"""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        error_code: Optional[str] = None,
        field_errors: Optional[List[FieldError]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.error_code = error_code
        self.field_errors = field_errors or []


class ApiResponse(BaseModel, Generic[T]):
    """标准化响应"""
    ok: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error_code: Optional[str] = None
    field_errors: Optional[List[FieldError]] = None
    status: Optional[int] = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_shape(self) -> "ApiResponse":
        if self.ok:
            if self.error_code is not None or self.field_errors:
                raise ValueError("success envelope cannot carry error details")
        else:
            if not self.message:
                raise ValueError("failure envelope requires a message")
            if self.data is not None:
                raise ValueError("failure envelope cannot carry data")
        return self

    @classmethod
    def success(cls, data: Any = None, message: Optional[str] = None, status: Optional[int] = None):
        return cls(ok=True, data=data, message=message, status=status)

    @classmethod
    def failure(
        cls,
        message: str,
        error_code: Optional[str] = None,
        field_errors: Optional[List[FieldError]] = None,
        status: Optional[int] = None
    ):
        return cls(
            ok=False,
            message=message,
            error_code=error_code,
            field_errors=field_errors,
            status=status
        )

    def raise_for_failure(self) -> Optional[T]:
        """成功时返回数据，失败时抛出 ApiError"""
        if not self.ok:
            raise ApiError(
                self.message,
                status=self.status,
                error_code=self.error_code,
                field_errors=self.field_errors
            )
        return self.data


def normalize_success(body: Any, status: Optional[int] = None) -> ApiResponse:
    """将成功响应体转换为统一结构

    优先取 data 字段；后端未包装时整个响应体即为数据
    """
    if isinstance(body, dict):
        message = body.get("message") if isinstance(body.get("message"), str) else None
        if "data" in body:
            return ApiResponse.success(body["data"], message=message, status=status)
        logger.debug("响应未包含data字段，使用完整响应体作为数据")
        return ApiResponse.success(body, message=message, status=status)

    return ApiResponse.success(body, status=status)


def normalize_failure(body: Any, status: Optional[int] = None) -> ApiResponse:
    """将失败响应体转换为统一结构"""
    if not isinstance(body, dict):
        body = {}

    error = body.get("error")
    error_code = str(error) if error not in (None, "") else None
    message = body.get("message") or error_code or REQUEST_FAILED_MESSAGE

    return ApiResponse.failure(
        str(message),
        error_code=error_code,
        field_errors=FieldError.parse_list(body.get("errors")),
        status=status
    )
