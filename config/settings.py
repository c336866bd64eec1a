"""
电商后台管理客户端统一配置文件
API地址、会话存储、日志等配置集中管理
"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 非生产环境下未配置API地址时使用的本地后端
DEFAULT_DEV_API_URL = "http://localhost:3000"


class Settings(BaseSettings):
    """统一配置管理类"""

    model_config = SettingsConfigDict(
        env_prefix="ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 项目基础配置
    project_name: str = Field(default="Storefront Admin")
    project_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # 路径配置
    base_dir: Path = Path(__file__).parent.parent
    logs_dir: Path = base_dir / "logs"

    # API配置
    api_url: Optional[str] = Field(default=None)
    request_timeout: Optional[float] = Field(default=None)

    # 会话存储配置
    session_backend: str = Field(default="file")  # memory, file, streamlit
    session_file: Path = Field(
        default_factory=lambda: Path.home() / ".storefront_admin" / "session.json")

    # 日志配置
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=True)
    log_format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[name]}:{function}:{line} | {message}"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def resolved_api_url(self) -> str:
        """解析后端基础地址

        生产环境未配置时返回空字符串，表示通过同源代理转发
        """
        if self.api_url:
            return self.api_url.rstrip("/")
        if self.is_production:
            return ""
        return DEFAULT_DEV_API_URL


def get_settings(environment: str = None) -> Settings:
    """获取配置实例，支持环境特定配置"""
    if environment is None:
        # 环境变量和 .env 文件中的 ADMIN_ENVIRONMENT 都由 Settings 自行读取
        settings_instance = Settings()
        environment = settings_instance.environment
    else:
        settings_instance = Settings(environment=environment)

    if environment == "production":
        # 生产环境特定配置
        settings_instance.debug = False
        settings_instance.log_level = "WARNING"
    elif environment == "testing":
        # 测试环境：会话只保存在内存中，不写日志文件
        settings_instance.debug = True
        settings_instance.log_level = "DEBUG"
        settings_instance.session_backend = "memory"
        settings_instance.log_to_file = False
    else:
        # 开发环境配置（默认）
        settings_instance.debug = True
        settings_instance.log_level = "DEBUG"

    return settings_instance


# 全局配置实例
settings = get_settings()
