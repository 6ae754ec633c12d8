"""统一异常定义"""
from typing import Any, Dict, Optional

from xrbase.config.status import ResultCode


class XrBaseException(Exception):
    """基础异常类

    携带结果代码（与 ResultDto 共用 ResultCode）、提示信息以及可选的扩展数据。
    """

    def __init__(
        self,
        code: ResultCode,
        message: str,
        ext_data: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        初始化异常

        Args:
            code: 结果代码
            message: 错误消息
            ext_data: 扩展数据
        """
        self.code = ResultCode.from_code(code).value
        self.message = message
        self.ext_data = ext_data
        super().__init__(self.message)

    def put_ext_data(self, key: str, value: Any) -> None:
        """写入扩展数据，首次写入时创建字典"""
        if self.ext_data is None:
            self.ext_data = {}
        self.ext_data[key] = value

    def __str__(self) -> str:
        """返回异常字符串表示

        Returns:
            str: 格式化的异常信息
        """
        return f"[{self.code}] {self.message}"


class ValidationException(XrBaseException):
    """参数校验异常"""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        """
        初始化验证异常

        Args:
            message: 错误消息
            field: 验证失败的字段名
        """
        self.field = field
        super().__init__(ResultCode.INVALID_PARAM, message)


class IllegalStateException(XrBaseException):
    """非法状态异常，对非成功的 ResultDto 断言成功时抛出"""

    def __init__(self, message: str, result_code: Optional[str] = None) -> None:
        """
        Args:
            message: 错误消息（取自 ResultDto.message）
            result_code: 触发断言的 ResultDto 的代码
        """
        self.result_code = result_code
        super().__init__(ResultCode.ILLEGAL_STATE, message)
