"""数据传输对象"""
from .page import PageData
from .result import ResultDto

__all__ = ["ResultDto", "PageData"]
