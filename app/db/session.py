from typing import Generator

from sqlalchemy.orm import Session

from app.db.base import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    获取数据库会话的依赖函数

    每个请求获取一个独立的会话，无论请求成功或失败都会关闭
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
