from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint

from app.db.base import Base, PreciseDateTime, precise_now, utc_now


class Product(Base):
    """
    商品数据库模型

    name/description 的长度与 price > 0 约束同时在存储层声明，
    version 列用于乐观并发控制（更新时校验）。
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    price = Column(Numeric(18, 2), nullable=False)
    created_at = Column(PreciseDateTime, nullable=False, default=utc_now, server_default=precise_now())
    updated_at = Column(PreciseDateTime, nullable=True)
    version = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
    )
    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
