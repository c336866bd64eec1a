"""
前端工具模块
"""
from .session import SessionManager

__all__ = [
    "SessionManager"
]
