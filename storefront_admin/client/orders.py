"""
订单管理API
"""
from typing import Any, Mapping, Optional, Union

from .envelope import ApiResponse
from .executor import RequestExecutor, encode_path_segment
from .models import OrderQuery, OrderStatus, TrackingInfo, dump_payload, merge_query

ORDERS_PATH = "/api/admin/orders"


class OrdersAPI:
    """订单相关操作"""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    async def get_orders(
        self,
        query: Optional[Union[OrderQuery, Mapping[str, Any]]] = None,
        **filters: Any
    ) -> ApiResponse:
        """获取订单列表，返回 {orders, pagination, stats}"""
        params = merge_query(OrderQuery, query, filters)
        return await self.executor.request("GET", ORDERS_PATH, params=params)

    async def get_stats(self) -> ApiResponse:
        """获取订单统计"""
        return await self.executor.request("GET", f"{ORDERS_PATH}/stats")

    async def get_order(self, order_id: str) -> ApiResponse:
        """获取单个订单"""
        return await self.executor.request("GET", f"{ORDERS_PATH}/{encode_path_segment(order_id)}")

    async def update_status(
        self,
        order_id: str,
        status: Union[OrderStatus, str],
        tracking: Optional[Union[TrackingInfo, Mapping[str, Any]]] = None
    ) -> ApiResponse:
        """更新订单状态，可附带物流信息"""
        body = {"status": OrderStatus(status).value}
        if tracking is not None:
            body["tracking"] = dump_payload(tracking)

        return await self.executor.request(
            "PATCH",
            f"{ORDERS_PATH}/{encode_path_segment(order_id)}/status",
            json_body=body
        )

    async def get_user_orders(self, user_id: str) -> ApiResponse:
        """获取指定用户的订单"""
        return await self.executor.request("GET", f"{ORDERS_PATH}/user/{encode_path_segment(user_id)}")
