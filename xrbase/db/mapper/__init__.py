"""Mapper 模块"""
from .base_mapper import BaseMapper
from .sqlalchemy_mapper import SQLAlchemyMapper

__all__ = ["BaseMapper", "SQLAlchemyMapper"]
