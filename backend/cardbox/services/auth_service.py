"""
认证服务：注册、登录
"""
import logging
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from cardbox.config import settings
from cardbox.errors import InvalidCredentials, ValidationError
from cardbox.models import User
from cardbox.stores import UserStore
from cardbox.utils.auth import (
    BCRYPT_MAX_BYTES,
    hash_password,
    verify_password,
    dummy_verify,
    password_too_long,
    create_session_token,
)

logger = logging.getLogger(__name__)


class AuthService:
    """注册与登录"""

    def __init__(self, db: AsyncSession):
        self.users = UserStore(db)

    async def register(self, username: str, password: str) -> User:
        """
        注册新用户

        重名由存储层的唯一约束判定，失败抛 DuplicateUsername。
        """
        if not username:
            raise ValidationError("username: must not be empty")
        min_length = max(settings.password_min_length, 1)
        if len(password or "") < min_length:
            raise ValidationError(f"password: must be at least {min_length} characters")
        if password_too_long(password):
            raise ValidationError(f"password: must be at most {BCRYPT_MAX_BYTES} bytes")

        user = await self.users.create(username, hash_password(password))
        logger.info("User registered: %s (%s)", user.username, user.id)
        return user

    async def login(self, username: str, password: str) -> Tuple[str, User]:
        """校验用户名密码，成功返回 (token, user)"""
        user = await self.users.find_by_username(username)
        # 超过 72 字节的密码一律视为不匹配
        if user is None or password_too_long(password):
            dummy_verify()
            logger.info("Login failed for %s", username)
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.info("Login failed for %s", username)
            raise InvalidCredentials()

        token = create_session_token(user.id, user.username)
        return token, user
