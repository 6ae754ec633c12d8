"""基于 SQLAlchemy 的 Mapper 实现

把条件Map翻译为 SQLAlchemy 语句：
- 普通键：字段等值过滤；list/set 值为 IN；未知字段抛出 ValidationException
- (操作符, 值) 元组：支持 == != > >= < <= in like；元组只用于操作符
- idList：主键 IN
- pagesize / pagestartindex：列表查询的 LIMIT / OFFSET
- dbType：忽略，方言以引擎为准
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlalchemy import func, select
from sqlalchemy import update as sa_update
from sqlalchemy.orm import Session

from xrbase.config import Cluster, ConditionKeys
from xrbase.exceptions import ValidationException
from xrbase.logging_config import get_logger

logger = get_logger(__name__)
ModelType = TypeVar("ModelType")

_OPERATORS = {
    '==': lambda field, val: field == val,
    '!=': lambda field, val: field != val,
    '>': lambda field, val: field > val,
    '>=': lambda field, val: field >= val,
    '<': lambda field, val: field < val,
    '<=': lambda field, val: field <= val,
    'in': lambda field, val: field.in_(val),
    'like': lambda field, val: field.like(val),
}


class SQLAlchemyMapper(Generic[ModelType]):
    """SQLAlchemy Mapper

    写操作只 flush，不提交；事务由调用方（如 db_session）控制。

    Attributes:
        model: SQLAlchemy模型类
        session: 主库会话
        read_session: 从库会话，未配置时从库读取使用主库会话
        primary_key_name: 主键字段名
    """

    def __init__(
        self,
        model: Type[ModelType],
        session: Session,
        primary_key_name: str = "id",
        read_session: Optional[Session] = None,
    ) -> None:
        """
        初始化Mapper

        Args:
            model: SQLAlchemy模型类
            session: 主库会话
            primary_key_name: 主键字段名
            read_session: 从库会话
        """
        if not hasattr(model, primary_key_name):
            raise AttributeError(f"Model {model.__name__} has no attribute '{primary_key_name}'")
        self.model = model
        self.session = session
        self.read_session = read_session
        self.primary_key_name = primary_key_name

    @property
    def primary_key(self) -> Any:
        return getattr(self.model, self.primary_key_name)

    def insert(self, entity: ModelType) -> None:
        self.session.add(entity)
        self._flush("insert")

    def insert_batch(self, entities: List[ModelType]) -> None:
        self.session.add_all(entities)
        self._flush("insert_batch")

    def delete(self, condition: Dict[str, Any]) -> int:
        """
        按条件删除

        会话中已加载的实例不做同步，删除后应重新查询。

        Raises:
            ValidationException: 条件中没有任何可用的过滤字段，或含有未知字段
        """
        clauses = self._build_clauses(condition)
        if not clauses:
            raise ValidationException(
                f"Refusing to delete {self.model.__name__} without a usable condition"
            )
        result = self.session.execute(
            sa_delete(self.model).where(*clauses).execution_options(synchronize_session=False)
        )
        return result.rowcount

    def update(self, field_map: Dict[str, Any]) -> int:
        """
        按主键更新其余非 None 字段

        Returns:
            int: 更新行数；没有可更新字段时为 0

        Raises:
            ValidationException: 字段Map中缺少主键值
        """
        id_val = field_map.get(self.primary_key_name)
        if id_val is None:
            raise ValidationException(
                f"Update on {self.model.__name__} requires '{self.primary_key_name}'",
                field=self.primary_key_name,
            )

        values = {}
        for key, value in field_map.items():
            if key == self.primary_key_name or value is None:
                continue
            if not hasattr(self.model, key):
                logger.warning(f"Model {self.model.__name__} has no attribute '{key}' for update")
                continue
            values[key] = value

        if not values:
            return 0

        result = self.session.execute(
            sa_update(self.model)
            .where(self.primary_key == id_val)
            .values(**values)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount

    def select_list(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> List[ModelType]:
        condition = condition or {}
        stmt = select(self.model).where(*self._build_clauses(condition)).order_by(self.primary_key)

        page_size = condition.get(ConditionKeys.PAGE_SIZE)
        if page_size is not None:
            stmt = stmt.limit(int(page_size)).offset(int(condition.get(ConditionKeys.PAGE_START_INDEX) or 0))

        return list(self._session_for(cluster).scalars(stmt).all())

    def select_count(self, condition: Dict[str, Any], cluster: Cluster = Cluster.MASTER) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._build_clauses(condition or {}))
        return int(self._session_for(cluster).scalar(stmt) or 0)

    def _session_for(self, cluster: Cluster) -> Session:
        if Cluster(cluster) == Cluster.SLAVE and self.read_session is not None:
            return self.read_session
        return self.session

    def _flush(self, operation: str) -> None:
        try:
            self.session.flush()
        except Exception as e:
            logger.error(f"Failed to {operation} {self.model.__name__}: {str(e)}")
            raise

    def _build_clauses(self, condition: Dict[str, Any]) -> List[Any]:
        """
        构建过滤条件

        元组只用于操作符形式 (操作符, 值)；IN 过滤请使用 list/set。

        Args:
            condition: 条件Map

        Returns:
            SQLAlchemy过滤表达式列表

        Raises:
            ValidationException: 条件键不是模型字段，或元组不是合法的操作符形式
        """
        clauses = []
        for key, value in condition.items():
            if key == ConditionKeys.ID_LIST:
                clauses.append(self.primary_key.in_(list(value)))
                continue
            if key in ConditionKeys.RESERVED:
                continue
            if not hasattr(self.model, key):
                logger.warning(f"Model {self.model.__name__} has no attribute '{key}' for filtering")
                raise ValidationException(
                    f"Unknown condition key '{key}' for {self.model.__name__}", field=key
                )

            field = getattr(self.model, key)

            # 元组形式的操作符，如 ('>', 100)
            if isinstance(value, tuple):
                if len(value) != 2 or not isinstance(value[0], str) or value[0] not in _OPERATORS:
                    raise ValidationException(
                        f"Condition '{key}' expects an (operator, value) tuple, got {value!r}",
                        field=key,
                    )
                op, val = value
                clauses.append(_OPERATORS[op](field, val))
            elif isinstance(value, (list, set, frozenset)):
                clauses.append(field.in_(list(value)))
            else:
                clauses.append(field == value)

        return clauses
