"""
后台管理API客户端
"""
from .api_client import AdminAPIClient
from .auth import AuthAPI
from .envelope import ApiError, ApiResponse, FieldError
from .executor import RequestExecutor, SessionInvalidated, build_query, encode_path_segment
from .models import (
    CreateProductData,
    OrderQuery,
    OrderStatus,
    ProductQuery,
    ProductStatus,
    SortOrder,
    TrackingInfo,
    TrackingUpdate,
    UpdatePricingData,
    UpdateProductData,
    UploadFile,
)
from .orders import OrdersAPI
from .products import ProductsAPI
from .session_store import (
    EMAIL_KEY,
    TOKEN_KEY,
    FileSessionStore,
    MemorySessionStore,
    SessionStore,
    StreamlitSessionStore,
    create_session_store,
)
from .uploads import UploadAPI

__all__ = [
    # 客户端
    "AdminAPIClient",
    "RequestExecutor",
    "SessionInvalidated",
    "AuthAPI",
    "ProductsAPI",
    "OrdersAPI",
    "UploadAPI",

    # 响应结构
    "ApiResponse",
    "ApiError",
    "FieldError",

    # 请求模型
    "ProductQuery",
    "OrderQuery",
    "CreateProductData",
    "UpdateProductData",
    "UpdatePricingData",
    "TrackingInfo",
    "TrackingUpdate",
    "UploadFile",
    "ProductStatus",
    "OrderStatus",
    "SortOrder",

    # 会话存储
    "SessionStore",
    "MemorySessionStore",
    "FileSessionStore",
    "StreamlitSessionStore",
    "create_session_store",
    "TOKEN_KEY",
    "EMAIL_KEY",

    # 工具函数
    "build_query",
    "encode_path_segment"
]
