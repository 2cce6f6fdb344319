from typing import Any, Dict

from pydantic import BaseModel

from app.core.security import get_password_hash
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.core.crud_service import CRUDService


class UserService(CRUDService[User, UserCreate, UserUpdate]):
    model = User
    resource_name = "User"

    def build_values(self, payload: BaseModel) -> Dict[str, Any]:
        values = super().build_values(payload)
        # 明文密码只在此处出现，随即替换为哈希
        values["password_hash"] = get_password_hash(values.pop("password"))
        return values
