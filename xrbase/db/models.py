"""实体基础定义

Entity 描述 BaseService 对实体的全部要求：创建/更新时间、版本号、
按字段名取值以及转换为字段Map。EntityMixin 为 SQLAlchemy 模型提供这些能力。
"""
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from sqlalchemy import BigInteger, Column, Integer, inspect


@runtime_checkable
class Entity(Protocol):
    """BaseService 可处理的实体"""

    create_time: Optional[int]
    update_time: Optional[int]
    version: Optional[int]

    def get_field(self, name: str) -> Any:
        ...

    def to_field_map(self) -> Dict[str, Any]:
        ...


class EntityMixin:
    """SQLAlchemy 模型混入类

    示例：
        ```python
        class Account(EntityMixin, Base):
            __tablename__ = "accounts"

            id = Column(Integer, primary_key=True, autoincrement=True)
            name = Column(String(64))
        ```
    """

    create_time = Column(BigInteger, nullable=True)  # 创建时间（秒）
    update_time = Column(BigInteger, nullable=True)  # 更新时间（秒）
    version = Column(Integer, nullable=False, default=0)  # 版本号

    def get_field(self, name: str) -> Any:
        """
        按字段名取值

        Raises:
            AttributeError: 模型没有该字段
        """
        if not hasattr(type(self), name):
            raise AttributeError(f"Model {type(self).__name__} has no attribute '{name}'")
        return getattr(self, name)

    def to_field_map(self) -> Dict[str, Any]:
        """列属性名 -> 当前值"""
        mapper = inspect(type(self))
        return {attr.key: getattr(self, attr.key) for attr in mapper.column_attrs}

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_field_map().items())
        return f"{type(self).__name__}({fields})"
