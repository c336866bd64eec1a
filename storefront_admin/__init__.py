"""
电商后台管理API客户端
"""
from .client import AdminAPIClient, ApiResponse
from .services import DashboardOverview, DashboardService

__version__ = "1.0.0"

__all__ = [
    "AdminAPIClient",
    "ApiResponse",
    "DashboardOverview",
    "DashboardService"
]
