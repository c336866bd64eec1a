"""
仪表板概览服务
并发获取订单统计、商品总数和最近订单
"""
import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..client.api_client import AdminAPIClient
from ..client.models import OrderQuery, ProductQuery, SortOrder
from ..utils.logger import get_logger

logger = get_logger("services.dashboard")

RECENT_ORDERS_LIMIT = 5


@dataclass
class DashboardOverview:
    """仪表板数据"""
    order_stats: Optional[Dict[str, Any]] = None
    product_count: int = 0
    recent_orders: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.errors


class DashboardService:
    """仪表板服务"""

    def __init__(self, client: AdminAPIClient):
        self.client = client

    async def load_overview(self) -> DashboardOverview:
        """加载仪表板概览，任一请求失败不影响其他数据"""
        stats_res, products_res, orders_res = await asyncio.gather(
            self.client.orders.get_stats(),
            self.client.products.get_products(ProductQuery(limit=1)),
            self.client.orders.get_orders(
                OrderQuery(limit=RECENT_ORDERS_LIMIT, sort_by="createdAt", sort_order=SortOrder.DESC)
            ),
        )

        overview = DashboardOverview()

        if stats_res.ok and isinstance(stats_res.data, dict):
            overview.order_stats = stats_res.data
        else:
            overview.errors.append(f"order stats: {stats_res.message}")

        if products_res.ok and isinstance(products_res.data, dict):
            pagination = products_res.data.get("pagination") or {}
            overview.product_count = int(pagination.get("total") or 0)
        else:
            overview.errors.append(f"products: {products_res.message}")

        if orders_res.ok and isinstance(orders_res.data, dict):
            overview.recent_orders = list(orders_res.data.get("orders") or [])
        else:
            overview.errors.append(f"recent orders: {orders_res.message}")

        if overview.errors:
            logger.warning(f"仪表板数据部分加载失败: {overview.errors}")
        else:
            logger.info(
                f"仪表板数据加载完成: 商品 {overview.product_count} 个, 最近订单 {len(overview.recent_orders)} 条"
            )

        return overview
