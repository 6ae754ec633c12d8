"""统一异常处理工具模块

服务层把所有失败抛给调用方；在模块边界上，由这里的工具把结果与异常统一转换为 ResultDto。
"""
import functools
import inspect
import logging
from typing import Any, Callable, Optional, TypeVar

from xrbase.dto.result import ResultDto
from xrbase.exceptions import XrBaseException

F = TypeVar("F", bound=Callable[..., Any])
logger = logging.getLogger(__name__)


def to_result(
    func: Callable[..., Any],
    *args: Any,
    operation_name: Optional[str] = None,
    **kwargs: Any,
) -> ResultDto:
    """
    执行函数并把结果包装为 ResultDto

    Args:
        func: 要执行的函数
        *args: 函数位置参数
        operation_name: 操作名称（用于日志）
        **kwargs: 函数关键字参数

    Returns:
        成功时为 success_data(返回值)，失败时为失败结果

    Example:
        result = to_result(service.select_by_id, 1)
    """
    op_name = operation_name or getattr(func, "__name__", "operation")
    try:
        return ResultDto.success_data(func(*args, **kwargs))
    except (SystemExit, KeyboardInterrupt):
        raise
    except XrBaseException as e:
        logger.warning(f"[{op_name}] {e}")
        return ResultDto.of_exception(e)
    except Exception as e:
        logger.error(f"[{op_name}] Operation failed: {e}", exc_info=True)
        return ResultDto.failure_message(str(e))


def result_boundary(operation_name: Optional[str] = None) -> Callable[[F], F]:
    """
    装饰器：把函数返回值包装为 ResultDto

    XrBaseException 转换为携带其代码、信息和扩展数据的失败结果；
    其他异常记录日志后转换为 UNKNOWN_SYSTEM_ERROR 失败结果；
    SystemExit 和 KeyboardInterrupt 直接抛出。

    Args:
        operation_name: 操作名称（用于日志，默认使用函数名）

    Returns:
        装饰器函数

    Example:
        @result_boundary("get_account")
        def get_account(account_id):
            return account_service.select_by_id(account_id)
    """
    def decorator(func: F) -> F:
        op_name = operation_name or func.__name__

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> ResultDto:
            try:
                return ResultDto.success_data(await func(*args, **kwargs))
            except (SystemExit, KeyboardInterrupt):
                raise
            except XrBaseException as e:
                logger.warning(f"[{op_name}] {e}")
                return ResultDto.of_exception(e)
            except Exception as e:
                logger.error(f"[{op_name}] Operation failed: {e}", exc_info=True)
                return ResultDto.failure_message(str(e))

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> ResultDto:
            return to_result(func, *args, operation_name=op_name, **kwargs)

        # 根据函数是否为协程返回对应的包装器
        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        return sync_wrapper  # type: ignore

    return decorator
