"""
前端界面层
为界面提供会话状态管理，页面渲染由调用方负责
"""
from .utils import SessionManager

__all__ = [
    "SessionManager"
]
