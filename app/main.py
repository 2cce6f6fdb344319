from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import traceback

from app.api.v1.api import api_router
from app.core.config import settings
from app.core.logging_config import setup_logging
from app.db.base import init_db
from app.infrastructure.exceptions import (
    IdMismatchError,
    ResourceNotFoundError,
    StorageValidationError,
)
from app.infrastructure.response import (
    standard_response,
    not_found_response,
    bad_request_response,
)

# 尚未配置日志时（例如直接由 uvicorn 加载）在此配置
if not logging.getLogger().handlers:
    setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Products and users CRUD API"
)

# 配置CORS - 重要: 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Location"]
)


@app.exception_handler(ResourceNotFoundError)
async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=not_found_response(entity=exc.resource, entity_id=exc.resource_id),
    )


@app.exception_handler(IdMismatchError)
async def id_mismatch_handler(request: Request, exc: IdMismatchError) -> JSONResponse:
    logger.info(f"拒绝请求 {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content=bad_request_response(
            msg=str(exc),
            data={"pathId": exc.path_id, "bodyId": exc.body_id},
        ),
    )


@app.exception_handler(StorageValidationError)
async def storage_validation_handler(request: Request, exc: StorageValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=bad_request_response(msg=str(exc), data=exc.detail),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求参数校验失败统一返回400"""
    return JSONResponse(
        status_code=400,
        content=bad_request_response(
            msg="Request validation failed",
            data=jsonable_encoder(exc.errors()),
        ),
    )


# 包含API路由
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.on_event("startup")
async def startup_db_client():
    """
    应用启动时初始化数据库
    """
    logger.info("正在初始化数据库...")
    try:
        init_db()
        logger.info("数据库初始化成功")
    except Exception as e:
        logger.error(f"数据库初始化失败: {str(e)}")
        logger.error(traceback.format_exc())
        # 没有数据库连接时应用仍然启动，数据接口会在请求时报错
        logger.warning("应用将继续启动，但数据库功能可能不可用")


@app.get("/")
async def root():
    """健康检查接口"""
    return standard_response(
        data={
            "status": "online",
            "version": settings.VERSION
        },
        msg=f"{settings.PROJECT_NAME} is running"
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
