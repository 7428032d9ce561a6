"""
认证相关 Schema
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from cardbox.config import settings


class CredentialsRequest(BaseModel):
    """注册 / 登录请求"""
    username: str = Field(..., max_length=settings.username_max_length)
    password: str

    @field_validator("username", "password")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


class RegisterRequest(CredentialsRequest):
    """注册请求（长度策略由 AuthService 校验）"""


class LoginRequest(CredentialsRequest):
    """登录请求"""


class UserPublic(BaseModel):
    """对外用户信息（不含密码哈希）"""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str
    created_at: int


class SessionUser(BaseModel):
    """登录响应里的用户"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str


class LoginResponse(BaseModel):
    """登录响应"""
    token: str
    user: SessionUser
