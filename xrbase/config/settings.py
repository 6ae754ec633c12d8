"""共享配置定义模块。

使用Pydantic Settings提供类型安全、环境变量支持的配置管理。
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DatabaseConfig


class BaseConfig(BaseSettings):
    """通用配置基类，使用Pydantic Settings进行配置管理。

    所有配置类都应该继承此类。支持：
    - 环境变量自动加载
    - 类型验证
    - 默认值设置
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",  # 允许额外的配置字段
    )


class AppConfig(BaseConfig):
    """应用级配置。

    定义应用名称、数据库连接、分页默认值以及日志输出等配置项。
    """

    APP_NAME: str = "xr-base"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Literal["development", "testing", "production"] = "development"

    # 数据库：主库用于写入，从库（可选）用于读取
    DATABASE_URL: str = "sqlite:///./xrbase.db"
    DATABASE_READ_URL: Optional[str] = None
    DB_TYPE: str = DatabaseConfig.DEFAULT_DB_TYPE
    DEFAULT_PAGE_SIZE: int = Field(default=DatabaseConfig.DEFAULT_PAGE_SIZE, gt=0)

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_JSON: bool = False
    LOG_DIR: str = "./logs"


@lru_cache()
def get_app_config() -> AppConfig:
    """获取缓存的应用程序配置实例。

    Returns:
        AppConfig: 应用程序配置对象

    注意：
        - 使用lru_cache缓存配置实例，避免重复创建
        - 如果配置变更，需要调用 get_app_config.cache_clear() 或重启应用
    """
    return AppConfig()
