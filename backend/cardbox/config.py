"""
配置管理 - 从环境变量加载所有配置
"""
from pydantic_settings import BaseSettings
from typing import List


DEV_JWT_SECRET = "dev-secret-change-in-production"


class Settings(BaseSettings):
    """应用配置"""

    # ===== 数据库 =====
    database_url: str = "sqlite+aiosqlite:///./data/cardbox.db"

    # ===== JWT =====
    # 通过环境变量 JWT_SECRET 注入；保留默认值时启动会告警
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    # ===== 账号策略 =====
    # 默认仅要求非空，生产环境应调高
    password_min_length: int = 1
    username_max_length: int = 50
    bcrypt_rounds: int = 12

    # ===== 错误输出 =====
    expose_internal_errors: bool = False

    # ===== 服务配置 =====
    backend_host: str = "0.0.0.0"
    backend_port: int = 5555
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# 全局配置实例
settings = Settings()
