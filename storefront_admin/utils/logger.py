"""
日志配置模块
"""
import sys
from loguru import logger
from config.settings import settings


def setup_logger():
    """配置日志系统"""

    # 移除默认的日志处理器
    logger.remove()
    logger.configure(extra={"name": "storefront_admin"})

    # 控制台日志
    logger.add(
        sys.stderr,
        format=settings.log_format,
        level=settings.log_level,
        colorize=True,
        backtrace=True,
        diagnose=settings.debug
    )

    if not settings.log_to_file:
        return logger

    settings.logs_dir.mkdir(parents=True, exist_ok=True)

    # 文件日志 - 所有日志
    logger.add(
        settings.logs_dir / "app.log",
        format=settings.log_format,
        level="DEBUG",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        backtrace=True,
        diagnose=False
    )

    # 错误日志
    logger.add(
        settings.logs_dir / "error.log",
        format=settings.log_format,
        level="ERROR",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        backtrace=True,
        diagnose=False
    )

    # 后端API调用日志
    logger.add(
        settings.logs_dir / "api.log",
        format=settings.log_format,
        level="INFO",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        filter=lambda record: "api" in record["extra"].get("name", "").lower(),
        backtrace=True,
        diagnose=False
    )

    return logger


# 初始化日志
app_logger = setup_logger()


def get_logger(name: str = None):
    """获取日志实例"""
    if name:
        return logger.bind(name=name)
    return logger
