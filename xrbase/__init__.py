"""xr-base：通用CRUD基础层

- ResultDto：统一响应信息格式
- XrBaseException：携带结果代码的基础异常
- BaseService：基于 Mapper 的通用增删改查服务
"""
from xrbase.config import Cluster, ResultCode
from xrbase.dto import PageData, ResultDto
from xrbase.exceptions import IllegalStateException, ValidationException, XrBaseException
from xrbase.services import BaseService

__version__ = "1.0.0"

__all__ = [
    "BaseService",
    "Cluster",
    "IllegalStateException",
    "PageData",
    "ResultCode",
    "ResultDto",
    "ValidationException",
    "XrBaseException",
]
