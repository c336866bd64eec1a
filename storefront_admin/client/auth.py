"""
管理员认证API
"""
from typing import Any, Dict

from ..utils.logger import get_logger
from .envelope import ApiResponse, normalize_failure, normalize_success
from .executor import RequestExecutor

logger = get_logger("api.auth")

LOGIN_PATH = "/api/admin/auth/login"
ME_PATH = "/api/admin/auth/me"


def _normalize_login(body: Any, status: int) -> ApiResponse:
    """登录响应标准化，在解包 data 之前检查响应体的 success 标志"""
    if isinstance(body, dict) and body.get("success") is False:
        return normalize_failure(
            {
                "message": body.get("message") or body.get("error") or "Login failed",
                "error": body.get("error"),
                "errors": body.get("errors"),
            },
            status=status
        )
    return normalize_success(body, status=status)


class AuthAPI:
    """认证相关操作"""

    def __init__(self, executor: RequestExecutor):
        self.executor = executor

    @property
    def store(self):
        return self.executor.store

    async def login(self, email: str, password: str) -> ApiResponse:
        """管理员登录

        成功时保存令牌和邮箱；失败时不写入任何凭证
        """
        response = await self.executor.request(
            "POST",
            LOGIN_PATH,
            json_body={"email": email, "password": password},
            authenticated=False,
            success_normalizer=_normalize_login
        )

        if not response.ok:
            logger.warning(f"管理员登录失败: {email} - {response.message}")
            return response

        data = response.data if isinstance(response.data, dict) else {}

        token = data.get("token")
        if not token:
            logger.warning(f"登录响应缺少令牌: {email}")
            return ApiResponse.failure("Login failed", error_code="invalid_response", status=response.status)

        admin: Dict[str, Any] = data.get("admin") if isinstance(data.get("admin"), dict) else {}
        stored_email = admin.get("email") or email

        self.store.save_credentials(str(token), str(stored_email))
        logger.info(f"管理员登录成功: {stored_email}")

        return ApiResponse.success(
            {"token": token, "admin": admin},
            message=response.message,
            status=response.status
        )

    async def me(self) -> ApiResponse:
        """获取当前管理员信息"""
        return await self.executor.request("GET", ME_PATH)

    async def logout(self) -> ApiResponse:
        """管理员登出，仅清除本地凭证"""
        email = self.store.email
        self.store.clear_credentials()
        logger.info(f"管理员登出: {email or 'unknown'}")
        return ApiResponse.success()

    def is_authenticated(self) -> bool:
        """本地是否存在令牌，不向服务端校验"""
        return bool(self.store.token)
