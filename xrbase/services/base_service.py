"""基础CRUD服务类

在 Mapper 之上提供通用的增删改查：填充时间戳与版本号、构建条件Map、计算分页。
"""
from typing import Any, Collection, Dict, Generic, List, Optional, TypeVar

from xrbase.config import Cluster, ConditionKeys, get_app_config
from xrbase.db.mapper.base_mapper import BaseMapper
from xrbase.dto.page import PageData
from xrbase.exceptions import ValidationException
from xrbase.logging_config import get_logger
from xrbase.utils.assert_utils import is_empty, not_empty, not_null
from xrbase.utils.time_utils import current_time_in_second

T = TypeVar("T")


class BaseService(Generic[T]):
    """基础CRUD服务类

    所有操作直接委托给 Mapper，不重试、不吞异常：
    参数校验失败抛出 ValidationException，Mapper 的异常原样抛出。

    读操作接受 cluster 参数并透传给 Mapper；写操作总是落在主库。

    Attributes:
        mapper: 数据访问对象
        primary_key_name: 主键字段名
        db_type: 数据库类型标识，随分页条件下发
    """

    def __init__(
        self,
        mapper: BaseMapper[T],
        primary_key_name: str = "id",
        db_type: Optional[str] = None,
        default_page_size: Optional[int] = None,
    ) -> None:
        """
        初始化服务

        Args:
            mapper: 数据访问对象
            primary_key_name: 主键字段名
            db_type: 数据库类型，默认取 AppConfig.DB_TYPE
            default_page_size: 默认每页条数，默认取 AppConfig.DEFAULT_PAGE_SIZE

        Raises:
            ValidationException: 默认每页条数不是正数
        """
        config = get_app_config()
        self.mapper = mapper
        self.primary_key_name = primary_key_name
        self.db_type = db_type or config.DB_TYPE
        self.default_page_size = config.DEFAULT_PAGE_SIZE if default_page_size is None else default_page_size
        if self.default_page_size < 1:
            raise ValidationException(
                f"default_page_size must be positive, got {self.default_page_size}",
                field="default_page_size",
            )
        self.logger = get_logger(f"{__name__}.{type(self).__name__}")

    def insert(self, entity: T) -> T:
        """
        新增实体

        未设置 create_time 时取当前时间；version 置 0；update_time 与 create_time 相同。

        Args:
            entity: 实体

        Returns:
            填充默认值后的实体
        """
        not_null(entity, "insert failed, with invalid param value.")

        if entity.create_time is None:
            entity.create_time = current_time_in_second()
        entity.version = 0
        entity.update_time = entity.create_time

        self.mapper.insert(entity)
        return entity

    def insert_batch(self, entities: List[T]) -> int:
        """批量新增，不填充默认值，返回条数"""
        not_empty(entities, "insert batch failed, with invalid param value.")

        self.mapper.insert_batch(entities)
        self.logger.debug(f"Inserted {len(entities)} records in batch")
        return len(entities)

    def insert_or_update(self, entity: T) -> T:
        """
        主键为空时新增，否则更新

        更新恰好影响一行时从主库重新查询该记录；否则按新增处理。
        检查与写入之间没有加锁，并发插入同一主键由存储的主键唯一约束报错。

        Args:
            entity: 实体

        Returns:
            持久化后的实体
        """
        not_null(entity, "insert or update failed, with invalid param value.")

        id_val = entity.get_field(self.primary_key_name)
        if is_empty(id_val):
            return self.insert(entity)

        if self.update(entity) == 1:
            return self.select_one({self.primary_key_name: id_val}, Cluster.MASTER)

        self.logger.debug(f"No row updated for {self.primary_key_name}={id_val}, inserting")
        return self.insert(entity)

    def delete_by_id(self, id: Any) -> int:
        not_null(id, "delete failed, with invalid primary key id.")

        return int(self.delete_by_map({self.primary_key_name: id}))

    def delete_by_ids(self, ids: Collection[Any]) -> int:
        not_empty(ids, "delete batch by id failed, with invalid param value.")

        return self.delete_by_map({ConditionKeys.ID_LIST: list(ids)})

    def delete_by_map(self, condition: Dict[str, Any]) -> int:
        not_empty(condition, "delete failed, with invalid condition.")

        deleted = self.mapper.delete(condition)
        self.logger.debug(f"Deleted {deleted} records by {condition}")
        return deleted

    def update(self, entity: T) -> int:
        """
        按主键更新实体

        未设置 update_time 时取当前时间；version 保持不变。

        Returns:
            更新行数
        """
        not_null(entity, "update failed, with invalid param value.")

        if entity.update_time is None:
            entity.update_time = current_time_in_second()

        return self.update_by_map(entity.to_field_map())

    def update_by_map(self, field_map: Dict[str, Any]) -> int:
        not_empty(field_map, "update failed, with invalid condition.")

        return self.mapper.update(field_map)

    def select_by_id(self, id: Any, cluster: Cluster = Cluster.MASTER) -> Optional[T]:
        if id is None:
            return None

        return self.select_one({self.primary_key_name: id}, cluster)

    def select_by_ids(self, ids: Collection[Any], cluster: Cluster = Cluster.MASTER) -> List[T]:
        if not ids:
            return []

        return self.select_list({ConditionKeys.ID_LIST: list(ids)}, cluster)

    def select_one(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> Optional[T]:
        """返回查询结果的第一条，没有结果时返回 None"""
        data = self.mapper.select_list(condition, cluster)
        return data[0] if data else None

    def select_list(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> List[T]:
        not_empty(condition, "select failed, with invalid condition.")

        return self.mapper.select_list(condition, cluster)

    def select_map(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> Dict[str, T]:
        """查询列表并以主键（字符串）为键组装字典"""
        return {
            str(data.get_field(self.primary_key_name)): data
            for data in self.select_list(condition, cluster)
        }

    def select_count(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> int:
        not_empty(condition, "select failed, with invalid condition.")

        return self.mapper.select_count(condition, cluster)

    def select_page(
        self,
        page: int,
        size: int,
        condition: Optional[Dict[str, Any]] = None,
        cluster: Cluster = Cluster.MASTER,
    ) -> PageData[T]:
        """
        分页查询

        页码小于1时取第1页；每页条数小于1时取默认值（10）。
        起始行与总页数都按修正后的每页条数计算。
        调用方传入的条件不会被修改，返回结果中的 condition 为实际使用的条件副本。

        Args:
            page: 页码（从1开始）
            size: 每页条数
            condition: 过滤条件
            cluster: 主库或从库

        Returns:
            PageData: 分页结果
        """
        page = page if page >= 1 else 1
        page_size = size if size >= 1 else self.default_page_size

        condition = dict(condition or {})
        condition[ConditionKeys.PAGE_SIZE] = page_size
        condition[ConditionKeys.PAGE_START_INDEX] = (page - 1) * page_size
        condition[ConditionKeys.DB_TYPE] = self.db_type

        records = self.select_count(condition, cluster)
        data = self.select_list(condition, cluster)

        return PageData(
            page=page,
            size=page_size,
            condition=condition,
            records=records,
            pages=PageData.count_pages(records, page_size),
            data=data,
        )
