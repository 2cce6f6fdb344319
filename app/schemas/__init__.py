from app.schemas.product import ProductCreate, ProductUpdate, ProductRead
from app.schemas.user import UserCreate, UserUpdate, UserRead

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    "UserCreate",
    "UserUpdate",
    "UserRead",
]
