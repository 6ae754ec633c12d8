"""Mapper 接口定义

BaseService 通过条件Map驱动的 Mapper 完成实际的增删改查。
条件Map中除字段名外的保留键见 ConditionKeys。
"""
from typing import Any, Dict, List, Protocol, TypeVar

from xrbase.config import Cluster

T = TypeVar("T")


class BaseMapper(Protocol[T]):
    """Mapper 接口"""

    def insert(self, entity: T) -> None:
        """新增一条记录"""
        ...

    def insert_batch(self, entities: List[T]) -> None:
        """批量新增"""
        ...

    def delete(self, condition: Dict[str, Any]) -> int:
        """按条件删除，返回删除行数"""
        ...

    def update(self, field_map: Dict[str, Any]) -> int:
        """按主键更新字段Map中的其余字段，返回更新行数"""
        ...

    def select_list(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> List[T]:
        """按条件查询列表，条件中含分页参数时只返回该页"""
        ...

    def select_count(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> int:
        """按条件统计记录数，忽略分页参数"""
        ...
