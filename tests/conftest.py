"""
测试公共夹具
使用真实的 aiohttp.web 应用模拟后台管理接口
"""
import asyncio
import os

os.environ.setdefault("ADMIN_ENVIRONMENT", "testing")

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from config.settings import get_settings
from storefront_admin.client import AdminAPIClient, MemorySessionStore


class FakeBackend:
    """可编排响应的假后端，记录收到的每个请求"""

    def __init__(self):
        self.routes = {}
        self.requests = []
        self.base_url = ""
        self.app = web.Application()
        self.app.router.add_route("*", "/{tail:.*}", self._handle)

    def add(self, method: str, path: str, status: int = 200, body=None, delay: float = 0):
        """注册响应；body为字符串时按原样返回非JSON内容，为None时返回空响应体"""
        self.routes[(method.upper(), path)] = (status, body, delay)

    def last(self, method: str = None, path: str = None) -> dict:
        for entry in reversed(self.requests):
            if method and entry["method"] != method:
                continue
            if path and entry["path"] != path:
                continue
            return entry
        raise AssertionError(f"no request recorded for {method} {path}")

    async def _handle(self, request: web.Request) -> web.Response:
        raw_path = request.raw_path.split("?", 1)[0]
        entry = {
            "method": request.method,
            "path": raw_path,
            "query": dict(request.query),
            "query_string": request.query_string,
            "authorization": request.headers.get("Authorization"),
            "content_type": request.headers.get("Content-Type"),
            "json": None,
            "files": [],
        }

        if request.content_type == "application/json":
            entry["json"] = await request.json()
        elif request.content_type.startswith("multipart/"):
            reader = await request.multipart()
            async for part in reader:
                entry["files"].append((part.name, part.filename, bytes(await part.read())))

        self.requests.append(entry)

        route = self.routes.get((request.method, raw_path))
        if route is None:
            return web.json_response({"success": False, "message": "Not found"}, status=404)

        status, body, delay = route
        if delay:
            await asyncio.sleep(delay)
        if body is None:
            return web.Response(status=status)
        if isinstance(body, str):
            return web.Response(status=status, text=body, content_type="text/html")
        return web.json_response(body, status=status)


@pytest_asyncio.fixture
async def backend():
    fake = FakeBackend()
    server = TestServer(fake.app)
    await server.start_server()
    fake.base_url = str(server.make_url("")).rstrip("/")
    yield fake
    await server.close()


@pytest.fixture
def test_settings():
    return get_settings("testing")


@pytest.fixture
def store():
    return MemorySessionStore()


@pytest.fixture
def logged_in_store():
    store = MemorySessionStore()
    store.save_credentials("test-token", "admin@example.com")
    return store


@pytest_asyncio.fixture
async def client(backend, store, test_settings):
    api = AdminAPIClient(settings=test_settings, store=store, base_url=backend.base_url)
    yield api
    await api.close()


@pytest_asyncio.fixture
async def authed_client(backend, logged_in_store, test_settings):
    api = AdminAPIClient(settings=test_settings, store=logged_in_store, base_url=backend.base_url)
    yield api
    await api.close()


@pytest_asyncio.fixture
async def offline_client(logged_in_store, test_settings):
    # 端口1上没有服务，连接会被拒绝
    api = AdminAPIClient(settings=test_settings, store=logged_in_store, base_url="http://127.0.0.1:1")
    yield api
    await api.close()
