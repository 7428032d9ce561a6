"""
认证工具函数
"""
from passlib.context import CryptContext
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any

from cardbox.config import settings

# bcrypt 只看前 72 字节，超出部分会被静默截断
BCRYPT_MAX_BYTES = 72

# 密码哈希上下文（bcrypt，每个哈希自带盐）
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """哈希密码"""
    return pwd_context.hash(password)


def password_too_long(password: str) -> bool:
    """按 UTF-8 字节数判断是否超出 bcrypt 可用长度"""
    return len(password.encode("utf-8")) > BCRYPT_MAX_BYTES


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码"""
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """用户不存在时也跑一次哈希校验，让两种失败耗时相近"""
    pwd_context.dummy_verify()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    创建 JWT Access Token

    Args:
        data: payload（至少包含 sub）
        expires_delta: 自定义过期时间，默认 jwt_expire_hours
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expire_hours))
    to_encode = {**data, "exp": expire, "iat": now}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """解码 JWT Token，返回 payload（签名错误、过期、格式错误均返回 None）"""
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None


def create_session_token(user_id: str, username: str) -> str:
    """为登录用户签发会话 token"""
    return create_access_token(data={"sub": user_id, "username": username})
