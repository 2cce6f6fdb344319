"""
通用资源路由

根据服务依赖和请求/响应模型生成一组标准的 CRUD 接口：

    GET    ""        列表
    GET    "/{id}"   详情
    POST   ""        创建，返回 201 及 Location
    PUT    "/{id}"   整体替换，返回 204
    DELETE "/{id}"   删除，返回 204
"""
from typing import Callable, List, Type

from fastapi import APIRouter, Depends, Path, Request, Response, status
from pydantic import BaseModel

from app.services.core.crud_service import CRUDService

# 与 Integer 主键列的取值范围一致
MAX_ID = 2 ** 31 - 1


def create_crud_router(
        service_dependency: Callable[..., CRUDService],
        create_schema: Type[BaseModel],
        update_schema: Type[BaseModel],
        read_schema: Type[BaseModel],
        item_route_name: str,
) -> APIRouter:
    """
    Build the five CRUD endpoints for one resource.

    ``item_route_name`` names the single-item GET route, used to build the
    Location header of newly created records.
    """
    router = APIRouter()

    @router.get("", response_model=List[read_schema])
    def list_items(service: CRUDService = Depends(service_dependency)):
        return service.list()

    @router.get("/{item_id}", response_model=read_schema, name=item_route_name)
    def get_item(
            item_id: int = Path(..., ge=1, le=MAX_ID),
            service: CRUDService = Depends(service_dependency),
    ):
        return service.get(item_id)

    @router.post("", response_model=read_schema, status_code=status.HTTP_201_CREATED)
    def create_item(
            payload: create_schema,
            request: Request,
            response: Response,
            service: CRUDService = Depends(service_dependency),
    ):
        obj = service.create(payload)
        response.headers["Location"] = str(request.url_for(item_route_name, item_id=obj.id))
        return obj

    @router.put("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def replace_item(
            payload: update_schema,
            item_id: int = Path(..., ge=1, le=MAX_ID),
            service: CRUDService = Depends(service_dependency),
    ):
        service.replace(item_id, payload)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    def delete_item(
            item_id: int = Path(..., ge=1, le=MAX_ID),
            service: CRUDService = Depends(service_dependency),
    ):
        service.delete(item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
