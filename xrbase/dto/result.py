"""统一响应信息格式

ResultDto 是模块边界上使用的通用响应包装：结果代码、提示信息、数据、扩展数据以及生成时间。
"""
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from xrbase.config.status import ResultCode
from xrbase.exceptions import IllegalStateException, XrBaseException
from xrbase.utils.time_utils import current_time_in_second

T = TypeVar("T")


class ResultDto(BaseModel, Generic[T]):
    """统一响应

    Attributes:
        code: 响应代码，见 ResultCode
        message: 信息提示
        data: 数据
        ext_data: 扩展数据（首次 put_ext_data 时创建）
        time: 生成时间（秒级时间戳）
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    code: str
    message: Optional[str] = None
    data: Optional[T] = None
    ext_data: Optional[Dict[str, Any]] = Field(default=None, alias="extData")
    time: int = Field(default_factory=current_time_in_second)

    @classmethod
    def success_message(cls, msg: str) -> "ResultDto":
        return cls.success(msg, None)

    @classmethod
    def success_data(cls, data: Any) -> "ResultDto":
        return cls.success("OK", data)

    @classmethod
    def success(cls, msg: Optional[str], data: Any) -> "ResultDto":
        """构造成功结果"""
        return cls(code=ResultCode.SUCCESS.value, message=msg, data=data)

    @classmethod
    def failure_message(cls, msg: str) -> "ResultDto":
        return cls.failure(msg, None)

    @classmethod
    def failure_data(cls, data: Any) -> "ResultDto":
        return cls.failure("Failed", data)

    @classmethod
    def failure(cls, msg: Optional[str], data: Any = None) -> "ResultDto":
        """构造失败结果，代码为 UNKNOWN_SYSTEM_ERROR"""
        return cls(code=ResultCode.UNKNOWN_SYSTEM_ERROR.value, message=msg, data=data)

    @classmethod
    def of_exception(cls, exc: XrBaseException) -> "ResultDto":
        """
        由 XrBaseException 构造失败结果

        Args:
            exc: 业务异常

        Returns:
            ResultDto: 携带异常代码、信息与扩展数据的结果
        """
        ext_data = dict(exc.ext_data) if exc.ext_data else None
        return cls(code=exc.code, message=exc.message, ext_data=ext_data)

    def put_ext_data(self, key: str, value: Any) -> None:
        if self.ext_data is None:
            self.ext_data = {}
        self.ext_data[key] = value

    def is_success(self) -> bool:
        return self.code == ResultCode.SUCCESS.value

    def assert_success(self) -> None:
        """
        断言结果为成功

        Raises:
            IllegalStateException: 代码不是 SUCCESS 时抛出，信息为本结果的 message
        """
        if self.is_success():
            return

        raise IllegalStateException(self.message, result_code=self.code)

    def get_success_data(self) -> Optional[T]:
        """断言成功后返回数据"""
        self.assert_success()
        return self.data
