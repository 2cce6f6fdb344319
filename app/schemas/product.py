from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, PlainSerializer

from app.schemas.base import ApiModel, UtcDatetime

# Decimal 默认序列化为字符串，这里输出为 JSON 数字
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductCreate(ApiModel):
    """
    商品创建请求模型
    """
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: JsonDecimal = Field(..., gt=0, max_digits=18, decimal_places=2)


class ProductUpdate(ProductCreate):
    """
    商品整体替换请求模型

    id 可选；若提供则必须与路径中的 id 一致。
    """
    id: Optional[int] = None


class ProductRead(ApiModel):
    id: int
    name: str
    description: Optional[str] = None
    price: JsonDecimal
    created_at: UtcDatetime
    updated_at: Optional[UtcDatetime] = None
