"""
用户相关API接口模块

响应中不包含密码；创建和替换时密码在服务层被哈希。
"""
from app.api.dependencies import get_user_service
from app.api.v1.endpoints.crud import create_crud_router
from app.schemas.user import UserCreate, UserUpdate, UserRead

router = create_crud_router(
    service_dependency=get_user_service,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    read_schema=UserRead,
    item_route_name="get_user",
)
