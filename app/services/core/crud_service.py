"""
通用 CRUD 服务

商品和用户两类资源共享同一套五个操作（列表、详情、创建、整体替换、删除），
每个资源只需声明模型、资源名以及请求数据到列值的转换。
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from app.db.base import Base, utc_now
from app.infrastructure.exceptions import (
    IdMismatchError,
    ResourceNotFoundError,
    StorageValidationError,
    WriteConflictError,
)

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def next_update_time(previous: Optional[datetime]) -> datetime:
    """
    计算新的更新时间

    保证严格大于上一次的更新时间，即使时钟没有前进。
    """
    now = utc_now()
    if previous is None:
        return now
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class CRUDService(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic resource service bound to one request-scoped database session.

    Subclasses set ``model`` and ``resource_name`` and may override
    ``build_values`` to control how a payload maps onto columns.
    """

    model: Type[ModelType]
    resource_name: str = "Resource"

    def __init__(self, db: Session):
        self.db = db

    def build_values(self, payload: BaseModel) -> Dict[str, Any]:
        """Column values written on create and replace; the id is never written."""
        return payload.model_dump(exclude={"id"})

    def list(self) -> List[ModelType]:
        return list(self.db.scalars(select(self.model).order_by(self.model.id)))

    def get(self, resource_id: int) -> ModelType:
        obj = self.db.get(self.model, resource_id)
        if obj is None:
            logger.info(f"{self.resource_name} {resource_id} 不存在")
            raise ResourceNotFoundError(self.resource_name, resource_id)
        return obj

    def exists(self, resource_id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == resource_id)
        return self.db.scalar(stmt) is not None

    def create(self, payload: CreateSchemaType) -> ModelType:
        obj = self.model(**self.build_values(payload))
        self.db.add(obj)
        self._commit()
        # 刷新以获取自动生成的属性
        self.db.refresh(obj)
        logger.info(f"成功创建{self.resource_name}: {obj.id}")
        return obj

    def replace(self, resource_id: int, payload: UpdateSchemaType) -> ModelType:
        """
        Overwrite every writable field of an existing record.

        A write conflict is checked once: if the record disappeared meanwhile
        the caller gets ResourceNotFoundError, otherwise WriteConflictError.
        """
        body_id = getattr(payload, "id", None)
        if body_id is not None and body_id != resource_id:
            raise IdMismatchError(resource_id, body_id)

        obj = self.get(resource_id)
        for field, value in self.build_values(payload).items():
            setattr(obj, field, value)
        obj.updated_at = next_update_time(obj.updated_at)

        self._commit_write(resource_id)
        logger.info(f"成功更新{self.resource_name}: {resource_id}")
        return obj

    def delete(self, resource_id: int) -> None:
        """Delete by primary key; the version column is not checked."""
        stmt = delete(self.model).where(self.model.id == resource_id)
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            self.db.rollback()
            logger.info(f"{self.resource_name} {resource_id} 不存在")
            raise ResourceNotFoundError(self.resource_name, resource_id)
        self._commit()
        logger.info(f"成功删除{self.resource_name}: {resource_id}")

    def _commit_write(self, resource_id: int) -> None:
        try:
            self._commit()
        except StaleDataError as exc:
            self.db.rollback()
            if not self.exists(resource_id):
                logger.info(f"{self.resource_name} {resource_id} 在写入前已被删除")
                raise ResourceNotFoundError(self.resource_name, resource_id) from exc
            logger.warning(f"{self.resource_name} {resource_id} 写入冲突: {exc}")
            raise WriteConflictError(self.resource_name, resource_id) from exc

    def _commit(self) -> None:
        try:
            self.db.commit()
        except (IntegrityError, DataError) as exc:
            self.db.rollback()
            logger.error(f"{self.resource_name} 违反存储约束: {exc.orig}")
            raise StorageValidationError(self.resource_name, str(exc.orig)) from exc
