"""响应代码与读库选择枚举

ResultCode 是 ResultDto 与 XrBaseException 共用的结果代码空间；
Cluster 用于读操作指定由主库还是从库提供数据。
"""
from enum import Enum


class ResultCode(str, Enum):
    """结果代码枚举

    Attributes:
        SUCCESS: 成功
        INVALID_PARAM: 参数校验失败
        DATA_NOT_FOUND: 数据不存在
        ILLEGAL_STATE: 非法状态（如对失败结果断言成功）
        DB_ERROR: 数据库操作失败
        UNKNOWN_SYSTEM_ERROR: 未知系统错误
    """
    SUCCESS = "0000"
    INVALID_PARAM = "1001"
    DATA_NOT_FOUND = "1002"
    ILLEGAL_STATE = "1003"
    DB_ERROR = "2001"
    UNKNOWN_SYSTEM_ERROR = "9999"

    def is_success(self) -> bool:
        """检查是否为成功代码"""
        return self == ResultCode.SUCCESS

    @classmethod
    def from_code(cls, code: str) -> "ResultCode":
        """根据代码字符串获取枚举

        Args:
            code: 代码字符串，如 "0000"

        Returns:
            ResultCode: 对应的枚举值

        Raises:
            ValueError: 如果代码无效
        """
        if isinstance(code, ResultCode):
            return code
        try:
            return cls(code)
        except ValueError:
            raise ValueError(
                f"无效的结果代码: '{code}'. "
                f"有效值: {[c.value for c in cls]}"
            )


class Cluster(str, Enum):
    """读库选择

    MASTER: 主库（读写）
    SLAVE: 从库（只读，未配置时回退到主库）
    """
    MASTER = "master"
    SLAVE = "slave"
