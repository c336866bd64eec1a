"""
请求执行器
负责单次HTTP调用：注入令牌、序列化请求体、解析并标准化响应、处理401会话失效
"""
import asyncio
import inspect
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union
from urllib.parse import quote, urlencode

import aiohttp

from ..utils.logger import get_logger
from .envelope import (
    NETWORK_ERROR_MESSAGE,
    NO_BASE_URL_MESSAGE,
    REQUEST_FAILED_MESSAGE,
    ApiResponse,
    normalize_failure,
    normalize_success,
)
from .models import RequestModel
from .session_store import SessionStore

logger = get_logger("api.executor")


@dataclass(frozen=True)
class SessionInvalidated:
    """会话失效事件"""
    method: str
    path: str
    status: int
    message: str


SessionListener = Callable[[SessionInvalidated], Union[None, Awaitable[None]]]


def build_query(params: Optional[Union[RequestModel, Mapping[str, Any]]]) -> str:
    """构造查询字符串，None和空字符串参数直接省略"""
    if params is None:
        return ""
    if isinstance(params, RequestModel):
        params = params.to_payload()

    pairs = []
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, str(value)))

    return urlencode(pairs)


def encode_path_segment(value: Any) -> str:
    """将标识符编码为单个路径段"""
    return quote(str(value), safe="")


class RequestExecutor:
    """请求执行器"""

    def __init__(
        self,
        base_url: str,
        store: SessionStore,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.store = store
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None
        self._listeners: List[SessionListener] = []

        if not self.base_url:
            logger.warning("未配置API基础地址，所有请求都将失败，请设置 ADMIN_API_URL")

    def on_session_invalidated(self, listener: SessionListener) -> SessionListener:
        """订阅会话失效事件"""
        self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: SessionListener):
        """取消订阅"""
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def _get_session(self) -> aiohttp.ClientSession:
        """获取HTTP会话"""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    def _get_headers(
        self,
        authenticated: bool,
        has_json_body: bool,
        extra: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """获取请求头"""
        headers = {"Accept": "application/json"}

        if has_json_body:
            headers["Content-Type"] = "application/json"

        if extra:
            headers.update(extra)

        if authenticated:
            token = self.store.token
            if token:
                headers["Authorization"] = f"Bearer {token}"

        return headers

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        """读取JSON响应体，解析失败时返回空对象"""
        raw = await response.read()
        if not raw or not raw.strip():
            return {}
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"响应体不是合法JSON: HTTP {response.status} {response.url}")
            return {}

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any = None,
        form: Optional[aiohttp.FormData] = None,
        params: Optional[Union[RequestModel, Mapping[str, Any]]] = None,
        headers: Optional[Mapping[str, str]] = None,
        authenticated: bool = True,
        success_normalizer: Optional[Callable[[Any, int], ApiResponse]] = None
    ) -> ApiResponse:
        """发送HTTP请求并返回标准化响应

        success_normalizer 接收2xx的原始响应体和状态码，默认按 data 字段解包
        """
        method = method.upper()

        if not self.base_url:
            logger.error(f"未配置API基础地址，无法发送请求: {method} {path}")
            return ApiResponse.failure(NO_BASE_URL_MESSAGE, error_code="no_base_url")

        url = f"{self.base_url}{path}"
        query = build_query(params)
        if query:
            url = f"{url}?{query}"

        request_headers = self._get_headers(authenticated, json_body is not None, headers)

        if form is not None:
            data = form
        elif json_body is not None:
            data = json.dumps(json_body, ensure_ascii=False)
        else:
            data = None

        try:
            session = await self._get_session()

            async with session.request(
                method=method,
                url=url,
                headers=request_headers,
                data=data
            ) as response:
                status = response.status
                body = await self._read_body(response)

        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.error(f"网络请求失败: {method} {path} - {type(e).__name__}: {e}")
            return ApiResponse.failure(NETWORK_ERROR_MESSAGE, error_code="network_error")
        except Exception as e:
            logger.exception(f"请求异常: {method} {path} - {e}")
            return ApiResponse.failure(REQUEST_FAILED_MESSAGE)

        if 200 <= status < 300:
            logger.debug(f"API请求成功: {method} {path} - HTTP {status}")
            normalizer = success_normalizer or normalize_success
            return normalizer(body, status)

        result = normalize_failure(body, status=status)
        logger.warning(f"API请求失败: {method} {path} - HTTP {status} - {result.message}")

        if status == 401 and authenticated:
            await self._invalidate_session(
                SessionInvalidated(method=method, path=path, status=status, message=result.message)
            )

        return result

    async def _invalidate_session(self, event: SessionInvalidated):
        """清除本地凭证并通知订阅者"""
        try:
            self.store.clear_credentials()
        except OSError as e:
            logger.error(f"清除会话凭证失败: {e}")

        logger.info(f"会话已失效: {event.method} {event.path}")

        for listener in list(self._listeners):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception(f"会话失效回调执行失败: {e}")

    async def close(self):
        """关闭HTTP会话"""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None
