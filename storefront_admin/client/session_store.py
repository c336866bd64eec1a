"""
会话存储
保存管理员令牌与邮箱，支持内存、本地文件和Streamlit会话状态三种后端
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Union

from ..utils.logger import get_logger

logger = get_logger("session.store")

TOKEN_KEY = "adminToken"
EMAIL_KEY = "adminEmail"


class SessionStore(ABC):
    """会话存储抽象"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """读取值，不存在时返回None"""

    @abstractmethod
    def set(self, key: str, value: str):
        """写入值"""

    @abstractmethod
    def clear(self, *keys: str):
        """清除指定键；未指定时清空全部"""

    @property
    def token(self) -> Optional[str]:
        return self.get(TOKEN_KEY) or None

    @property
    def email(self) -> Optional[str]:
        return self.get(EMAIL_KEY) or None

    def save_credentials(self, token: str, email: str):
        """同时保存令牌和邮箱"""
        self.set(TOKEN_KEY, token)
        self.set(EMAIL_KEY, email)

    def clear_credentials(self):
        """同时清除令牌和邮箱"""
        self.clear(TOKEN_KEY, EMAIL_KEY)


class MemorySessionStore(SessionStore):
    """进程内会话存储"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str):
        self._data[key] = value

    def clear(self, *keys: str):
        if not keys:
            self._data.clear()
            return
        for key in keys:
            self._data.pop(key, None)


class FileSessionStore(SessionStore):
    """JSON文件会话存储，进程重启后仍然有效"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"会话文件读取失败，按空会话处理: {self.path} - {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _save(self, data: Dict[str, str]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str):
        data = self._load()
        data[key] = value
        self._save(data)

    def clear(self, *keys: str):
        if not keys:
            if self.path.exists():
                self.path.unlink()
            return
        data = self._load()
        for key in keys:
            data.pop(key, None)
        self._save(data)


class StreamlitSessionStore(SessionStore):
    """基于 st.session_state 的会话存储"""

    def __init__(self, state: Optional[MutableMapping[str, Any]] = None, namespace: str = "storefront_admin"):
        if state is None:
            import streamlit as st
            state = st.session_state
        self._state = state
        self._namespace = namespace

    def _bucket(self) -> Dict[str, str]:
        if self._namespace not in self._state:
            self._state[self._namespace] = {}
        return self._state[self._namespace]

    def get(self, key: str) -> Optional[str]:
        return self._bucket().get(key)

    def set(self, key: str, value: str):
        self._bucket()[key] = value

    def clear(self, *keys: str):
        bucket = self._bucket()
        if not keys:
            bucket.clear()
            return
        for key in keys:
            bucket.pop(key, None)


def create_session_store(settings=None) -> SessionStore:
    """根据配置创建会话存储"""
    if settings is None:
        from config.settings import settings

    backend = settings.session_backend
    if backend == "memory":
        return MemorySessionStore()
    if backend == "file":
        return FileSessionStore(settings.session_file)
    if backend == "streamlit":
        return StreamlitSessionStore()

    raise ValueError(f"Unsupported session backend: {backend}")
