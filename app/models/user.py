from sqlalchemy import Column, Integer, String

from app.db.base import Base, PreciseDateTime, precise_now, utc_now


class User(Base):
    """
    用户数据库模型

    密码只保存单向加盐哈希（password_hash），不保存明文。
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False)
    phone_number = Column(String(20), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(PreciseDateTime, nullable=False, default=utc_now, server_default=precise_now())
    updated_at = Column(PreciseDateTime, nullable=True)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<User(id={self.id}, name='{self.name}', email='{self.email}')>"
