"""
请求参数模型
Python侧使用snake_case字段，序列化时输出后端使用的camelCase别名
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProductStatus(str, Enum):
    """商品状态"""
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class OrderStatus(str, Enum):
    """订单状态"""
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class SortOrder(str, Enum):
    """排序方向"""
    ASC = "asc"
    DESC = "desc"


class RequestModel(BaseModel):
    """请求模型基类"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="forbid",
    )

    def to_payload(self) -> Dict[str, Any]:
        """仅序列化显式设置过的字段"""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ProductQuery(RequestModel):
    """商品列表查询参数"""
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    search: Optional[str] = None
    category: Optional[str] = None
    status: Optional[ProductStatus] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None


class OrderQuery(RequestModel):
    """订单列表查询参数"""
    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    status: Optional[OrderStatus] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class CreateProductData(RequestModel):
    """创建商品"""
    name: str
    description: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    base_price: float = Field(ge=0)
    discounted_price: Optional[float] = Field(default=None, ge=0)
    charge_tax: Optional[bool] = None
    in_stock: Optional[bool] = None
    stock: Optional[int] = Field(default=None, ge=0)
    status: Optional[ProductStatus] = None
    category: str
    image: Optional[str] = None
    images: Optional[List[str]] = None


class UpdateProductData(RequestModel):
    """部分更新商品"""
    name: Optional[str] = None
    description: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    base_price: Optional[float] = Field(default=None, ge=0)
    discounted_price: Optional[float] = Field(default=None, ge=0)
    charge_tax: Optional[bool] = None
    in_stock: Optional[bool] = None
    stock: Optional[int] = Field(default=None, ge=0)
    status: Optional[ProductStatus] = None
    category: Optional[str] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None


class UpdatePricingData(RequestModel):
    """更新商品价格，discounted_price显式设为None表示清除折扣价"""
    base_price: float = Field(ge=0)
    discounted_price: Optional[float] = Field(default=None, ge=0)
    charge_tax: Optional[bool] = None
    in_stock: Optional[bool] = None


class TrackingUpdate(RequestModel):
    """物流轨迹"""
    status: str
    message: str
    timestamp: str
    location: Optional[str] = None


class TrackingInfo(RequestModel):
    """物流信息"""
    carrier: Optional[str] = None
    tracking_number: Optional[str] = None
    tracking_url: Optional[str] = None
    estimated_delivery: Optional[str] = None
    updates: Optional[List[TrackingUpdate]] = None


@dataclass
class UploadFile:
    """待上传的文件"""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


Payload = Union[RequestModel, Mapping[str, Any]]


def dump_payload(payload: Optional[Payload]) -> Optional[Dict[str, Any]]:
    """模型或普通字典统一转换为请求体"""
    if payload is None:
        return None
    if isinstance(payload, RequestModel):
        return payload.to_payload()
    return dict(payload)


def merge_query(
    model_cls: Type[RequestModel],
    query: Optional[Payload] = None,
    filters: Optional[Mapping[str, Any]] = None
) -> Optional[RequestModel]:
    """合并查询模型、字典和关键字参数，统一经过模型校验与别名转换"""
    if query is None and not filters:
        return None

    values: Dict[str, Any] = {}
    if isinstance(query, RequestModel):
        values.update(query.model_dump(exclude_unset=True))
    elif query is not None:
        values.update(query)
    if filters:
        values.update(filters)

    return model_cls.model_validate(values)
