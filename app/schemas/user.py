from typing import Optional

from pydantic import Field

from app.schemas.base import ApiModel, UtcDatetime


class UserCreate(ApiModel):
    """
    用户创建请求模型

    password 只在写入时接收，保存前会被哈希。
    """
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=1, max_length=100)


class UserUpdate(UserCreate):
    id: Optional[int] = None


class UserRead(ApiModel):
    """用户响应模型，不包含任何密码信息"""
    id: int
    name: str
    email: str
    phone_number: str
    created_at: UtcDatetime
    updated_at: Optional[UtcDatetime] = None
