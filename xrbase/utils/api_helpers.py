"""API辅助工具模块

在 FastAPI 应用边界上把 XrBaseException 渲染为失败的 ResultDto。
"""
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from xrbase.config import ResultCode
from xrbase.dto.result import ResultDto
from xrbase.exceptions import XrBaseException
from xrbase.logging_config import get_logger

logger = get_logger(__name__)

_HTTP_STATUS: Dict[str, int] = {
    ResultCode.INVALID_PARAM.value: status.HTTP_400_BAD_REQUEST,
    ResultCode.DATA_NOT_FOUND.value: status.HTTP_404_NOT_FOUND,
}


def http_status_for(code: str) -> int:
    """结果代码对应的HTTP状态码，未映射的代码为500"""
    return _HTTP_STATUS.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def render_result(result: ResultDto) -> Dict[str, Any]:
    """ResultDto 转为 JSON 字典（扩展数据使用 extData 键）"""
    return result.model_dump(mode="json", by_alias=True)


async def xr_exception_handler(request: Request, exc: XrBaseException) -> JSONResponse:
    """处理 XrBaseException"""
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=http_status_for(exc.code),
        content=render_result(ResultDto.of_exception(exc)),
    )


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """处理未预期异常，不向调用方暴露内部错误信息"""
    logger.error(f"{request.method} {request.url.path} failed unexpectedly", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=render_result(ResultDto.failure_message("An unexpected error occurred")),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    注册异常处理器

    Example:
        app = FastAPI()
        register_exception_handlers(app)
    """
    app.add_exception_handler(XrBaseException, xr_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
