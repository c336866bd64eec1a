"""
API客户端
与电商后台管理接口进行通信
"""
from typing import Optional

import aiohttp

from ..utils.logger import get_logger
from .auth import AuthAPI
from .executor import RequestExecutor, SessionListener
from .orders import OrdersAPI
from .products import ProductsAPI
from .session_store import SessionStore, create_session_store
from .uploads import UploadAPI

logger = get_logger("api.client")


class AdminAPIClient:
    """后台管理API客户端"""

    def __init__(
        self,
        settings=None,
        store: Optional[SessionStore] = None,
        base_url: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        if settings is None:
            from config.settings import settings

        self.store = store if store is not None else create_session_store(settings)
        self.executor = RequestExecutor(
            base_url if base_url is not None else settings.resolved_api_url,
            self.store,
            timeout=settings.request_timeout,
            session=session
        )

        self.auth = AuthAPI(self.executor)
        self.products = ProductsAPI(self.executor)
        self.orders = OrdersAPI(self.executor)
        self.uploads = UploadAPI(self.executor)

        logger.info(f"API客户端初始化: {self.executor.base_url or '(same origin)'}")

    @property
    def base_url(self) -> str:
        return self.executor.base_url

    def on_session_invalidated(self, listener: SessionListener) -> SessionListener:
        """订阅会话失效事件（收到401时触发）"""
        return self.executor.on_session_invalidated(listener)

    def is_authenticated(self) -> bool:
        return self.auth.is_authenticated()

    async def close(self):
        """关闭客户端"""
        await self.executor.close()
        logger.info("API客户端已关闭")

    async def __aenter__(self) -> "AdminAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
