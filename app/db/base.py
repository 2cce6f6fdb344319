import logging
from datetime import datetime, timezone

from sqlalchemy import DateTime, create_engine, text
from sqlalchemy.dialects import mysql
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """获取当前的UTC时间"""
    return datetime.now(timezone.utc)


# MySQL 的 DATETIME 默认不保存小数秒，时间戳列统一保留到微秒
PreciseDateTime = DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


class precise_now(ColumnElement):
    """数据库端的当前时间，精度与 PreciseDateTime 一致"""
    type = DateTime()
    inherit_cache = True


@compiles(precise_now)
def _default_precise_now(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


@compiles(precise_now, "mysql")
def _mysql_precise_now(element, compiler, **kw):
    return "CURRENT_TIMESTAMP(6)"


def create_db_engine(database_uri: str, echo: bool = False) -> Engine:
    """
    根据连接串创建数据库引擎

    SQLite 不支持连接池参数，且需要允许跨线程使用连接（FastAPI 在线程池中执行同步接口）
    """
    url = make_url(database_uri)
    if url.get_backend_name() == "sqlite":
        return create_engine(
            database_uri,
            connect_args={"check_same_thread": False},
            echo=echo,
        )

    return create_engine(
        database_uri,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,
        echo=echo,
    )


# 创建数据库引擎
engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.DB_ECHO)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database(db_uri: str) -> None:
    url = make_url(db_uri)
    db_name = url.database
    temp_engine = create_engine(url.set(database=None))
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


def init_db(bind: Engine = None) -> None:
    """
    初始化数据库，如果表不存在则创建
    """
    bind = bind or engine

    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 注册模型到 Base.metadata
    from app import models  # noqa: F401

    if bind.dialect.name == "mysql":
        _ensure_mysql_database(bind.url.render_as_string(hide_password=False))

    Base.metadata.create_all(bind=bind)
    logger.info("所有表已创建或已存在")
