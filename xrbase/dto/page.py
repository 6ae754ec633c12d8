"""分页结果"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, TypeVar

T = TypeVar("T")


@dataclass
class PageData(Generic[T]):
    """分页查询结果

    Attributes:
        page: 当前页码（从1开始）
        size: 每页条数
        condition: 本次查询使用的条件（含分页参数）
        records: 总记录数
        pages: 总页数
        data: 当前页数据
    """
    page: int
    size: int
    condition: Dict[str, Any] = field(default_factory=dict)
    records: int = 0
    pages: int = 0
    data: List[T] = field(default_factory=list)

    @staticmethod
    def count_pages(records: int, size: int) -> int:
        """总页数 = records / size 向上取整"""
        return records // size + (1 if records % size > 0 else 0)
