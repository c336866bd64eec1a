"""
商品管理API
"""
from typing import Any, Mapping, Optional, Union

from .envelope import ApiResponse
from .executor import RequestExecutor, encode_path_segment
from .models import (
    CreateProductData,
    Payload,
    ProductQuery,
    UpdatePricingData,
    UpdateProductData,
    dump_payload,
    merge_query,
)

PRODUCTS_PATH = "/api/admin/products"


class ProductsAPI:
    """商品相关操作"""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    def _product_path(self, product_id: str, suffix: str = "") -> str:
        return f"{PRODUCTS_PATH}/{encode_path_segment(product_id)}{suffix}"

    async def get_products(
        self,
        query: Optional[Union[ProductQuery, Mapping[str, Any]]] = None,
        **filters: Any
    ) -> ApiResponse:
        """获取商品列表，返回 {products, pagination}"""
        params = merge_query(ProductQuery, query, filters)
        return await self.executor.request("GET", PRODUCTS_PATH, params=params)

    async def get_product(self, product_id: str) -> ApiResponse:
        """获取单个商品"""
        return await self.executor.request("GET", self._product_path(product_id))

    async def create_product(self, data: Union[CreateProductData, Mapping[str, Any]]) -> ApiResponse:
        """创建商品"""
        return await self.executor.request("POST", PRODUCTS_PATH, json_body=dump_payload(data))

    async def update_product(
        self,
        product_id: str,
        data: Union[UpdateProductData, Mapping[str, Any]]
    ) -> ApiResponse:
        """更新商品，仅发送显式设置的字段"""
        return await self.executor.request(
            "PUT", self._product_path(product_id), json_body=dump_payload(data)
        )

    async def update_pricing(self, product_id: str, data: Payload) -> ApiResponse:
        """仅更新商品价格"""
        if isinstance(data, Mapping):
            data = UpdatePricingData.model_validate(data)
        return await self.executor.request(
            "PATCH", self._product_path(product_id, "/pricing"), json_body=dump_payload(data)
        )

    async def delete_product(self, product_id: str) -> ApiResponse:
        """删除商品"""
        return await self.executor.request("DELETE", self._product_path(product_id))

    async def get_categories(self) -> ApiResponse:
        """获取全部商品分类"""
        return await self.executor.request("GET", f"{PRODUCTS_PATH}/categories/list")
