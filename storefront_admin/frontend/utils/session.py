"""
会话管理器
管理界面层的会话状态，并在会话失效时切换到登录页
"""
import streamlit as st
from typing import Any, MutableMapping, Optional

from ...client.executor import SessionInvalidated
from ...client.session_store import SessionStore
from ...utils.logger import get_logger

logger = get_logger("frontend.session")

LOGIN_PAGE = "login"
DEFAULT_PAGE = "dashboard"
SESSION_EXPIRED_NOTICE = "Session expired, please log in again"


class SessionManager:
    """会话管理器"""

    def __init__(self, store: SessionStore, state: Optional[MutableMapping[str, Any]] = None):
        self.store = store
        self.state = state if state is not None else st.session_state
        self._initialize_session()
        logger.debug("会话管理器初始化完成")

    def _initialize_session(self):
        """初始化会话状态"""
        if "current_page" not in self.state:
            self.state["current_page"] = DEFAULT_PAGE if self.is_authenticated() else LOGIN_PAGE

        if "session_notice" not in self.state:
            self.state["session_notice"] = None

    # 认证相关方法
    def is_authenticated(self) -> bool:
        """检查本地是否存在令牌"""
        return bool(self.store.token)

    def get_admin_email(self) -> Optional[str]:
        """获取当前管理员邮箱"""
        return self.store.email

    # 页面状态管理
    def get_current_page(self) -> str:
        """获取当前页面，未登录时始终为登录页"""
        if not self.is_authenticated():
            self.state["current_page"] = LOGIN_PAGE
        return self.state["current_page"]

    def set_current_page(self, page: str):
        """设置当前页面"""
        self.state["current_page"] = page
        logger.debug(f"页面切换: {page}")

    def pop_notice(self) -> Optional[str]:
        """取出并清除待显示的提示"""
        notice = self.state.get("session_notice")
        self.state["session_notice"] = None
        return notice

    # 会话失效处理
    def handle_session_invalidated(self, event: SessionInvalidated):
        """收到401后返回登录页"""
        self.state["current_page"] = LOGIN_PAGE
        self.state["session_notice"] = SESSION_EXPIRED_NOTICE
        logger.info(f"会话失效，跳转登录页: {event.method} {event.path}")

    def attach(self, client) -> "SessionManager":
        """订阅客户端的会话失效事件"""
        client.on_session_invalidated(self.handle_session_invalidated)
        return self
