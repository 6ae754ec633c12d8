"""统一数据库模块"""
from .mapper import BaseMapper, SQLAlchemyMapper
from .models import Entity, EntityMixin
from .session import Base, DatabaseManager, db_session, get_database_manager, get_db, get_session

__all__ = [
    "Base",
    "get_db",
    "get_session",
    "db_session",
    "get_database_manager",
    "DatabaseManager",
    "Entity",
    "EntityMixin",
    "BaseMapper",
    "SQLAlchemyMapper",
]
