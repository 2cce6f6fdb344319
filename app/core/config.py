import json
import os
from typing import Annotated, List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_V1_STR: str = "/api"
    PROJECT_NAME: str = "Catalog API"
    VERSION: str = "0.1.0"

    # CORS 设置
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:3000", "http://localhost:5173", "http://localhost:8080", "*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # JSON array first, comma separated otherwise
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                else:
                    return [i.strip() for i in v.split(",")]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "catalog"

    # 显式连接串优先，例如 sqlite:///./catalog.db
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        # 默认使用MySQL
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True
    # 回显SQL语句，便于调试
    DB_ECHO: bool = False

    # 日志设置
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8092
    RELOAD: bool = True

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
