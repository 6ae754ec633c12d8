"""时间工具模块

统一的时间戳来源，实体的 create_time/update_time 与 ResultDto.time 均使用秒级 Unix 时间戳。
"""
import time


def current_time_in_second() -> int:
    """
    获取当前时间的秒级 Unix 时间戳

    Returns:
        int: 当前秒数

    Example:
        >>> isinstance(current_time_in_second(), int)
        True
    """
    return int(time.time())
