"""配置常量定义"""


class DatabaseConfig:
    """数据库配置常量"""
    DEFAULT_PAGE_SIZE = 10  # 默认分页大小
    DEFAULT_DB_TYPE = "MYSQL"  # 默认数据库类型标识，随分页条件下发给Mapper


class DatabasePoolConfig:
    """数据库连接池配置常量"""
    DEFAULT_POOL_SIZE = 10  # 默认连接池大小
    DEFAULT_MAX_OVERFLOW = 20  # 默认最大溢出连接数
    DEFAULT_POOL_RECYCLE = 3600  # 默认连接回收时间（秒，1小时）


class TimeoutConfig:
    """超时配置常量"""
    DEFAULT_DATABASE_CONNECT_TIMEOUT = 10  # 默认数据库连接超时（秒）
    DEFAULT_DATABASE_READ_TIMEOUT = 30  # 默认数据库读取超时（秒）
    DEFAULT_DATABASE_WRITE_TIMEOUT = 30  # 默认数据库写入超时（秒）


class ConditionKeys:
    """条件Map中的保留键"""
    ID_LIST = "idList"  # 主键集合
    PAGE_SIZE = "pagesize"  # 每页条数
    PAGE_START_INDEX = "pagestartindex"  # 起始行
    DB_TYPE = "dbType"  # 数据库类型

    RESERVED = frozenset({ID_LIST, PAGE_SIZE, PAGE_START_INDEX, DB_TYPE})
