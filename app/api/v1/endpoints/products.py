"""
商品相关API接口模块
"""
from app.api.dependencies import get_product_service
from app.api.v1.endpoints.crud import create_crud_router
from app.schemas.product import ProductCreate, ProductUpdate, ProductRead

router = create_crud_router(
    service_dependency=get_product_service,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    read_schema=ProductRead,
    item_route_name="get_product",
)
