"""
业务服务模块
"""
from .dashboard import DashboardOverview, DashboardService

__all__ = [
    "DashboardOverview",
    "DashboardService"
]
