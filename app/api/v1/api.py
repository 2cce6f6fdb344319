from fastapi import APIRouter

from app.api.v1.endpoints import products, users


api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
