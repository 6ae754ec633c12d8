"""参数断言工具

在调用 Mapper 之前校验入参，失败时抛出 ValidationException。
"""
from collections.abc import Mapping, Sized
from typing import Any, Optional

from xrbase.exceptions import ValidationException


def is_empty(value: Any) -> bool:
    """
    判断值是否为空

    None、空字符串（含仅空白）、空集合/字典均视为空。

    Args:
        value: 待检查的值

    Returns:
        bool: 为空返回 True
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (Sized, Mapping)):
        return len(value) == 0
    return False


def not_null(value: Any, message: str, field: Optional[str] = None) -> None:
    """断言值不为 None"""
    if value is None:
        raise ValidationException(message, field)


def not_empty(value: Any, message: str, field: Optional[str] = None) -> None:
    """断言值非空（见 is_empty）"""
    if is_empty(value):
        raise ValidationException(message, field)
