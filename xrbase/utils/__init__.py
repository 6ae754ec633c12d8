"""
Core utilities module

api_helpers 与 exception_handler 依赖 xrbase.dto，请按完整路径导入。
"""

from .assert_utils import is_empty, not_empty, not_null
from .time_utils import current_time_in_second

__all__ = [
    "is_empty",
    "not_empty",
    "not_null",
    "current_time_in_second",
]
