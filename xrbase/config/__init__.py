"""核心配置工具模块。

提供统一的配置管理功能，包括：
- BaseConfig: 基础配置类
- AppConfig: 应用级配置
- constants: 配置常量（DatabaseConfig、ConditionKeys等）
- status: 结果代码与读库选择枚举（ResultCode、Cluster）
"""

from .constants import (
    ConditionKeys,
    DatabaseConfig,
    DatabasePoolConfig,
    TimeoutConfig,
)
from .settings import AppConfig, BaseConfig, get_app_config
from .status import Cluster, ResultCode

__all__ = [
    "BaseConfig",
    "AppConfig",
    "get_app_config",
    # 配置常量
    "ConditionKeys",
    "DatabaseConfig",
    "DatabasePoolConfig",
    "TimeoutConfig",
    # 枚举
    "ResultCode",
    "Cluster",
]
