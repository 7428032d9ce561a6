"""
路由依赖：会话校验

无状态：只验签名和过期时间，不查库，token 在过期前始终有效。
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from cardbox.errors import Unauthenticated, Forbidden
from cardbox.utils.auth import decode_access_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """已认证的调用者"""
    id: str
    username: str


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identity:
    """从 Authorization: Bearer <token> 解析调用者身份"""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    payload = decode_access_token(credentials.credentials)
    if not payload:
        logger.debug("Rejected token on %s", request.url.path)
        raise Forbidden("Invalid or expired token")

    user_id = payload.get("sub")
    username = payload.get("username")
    if not user_id or not username:
        logger.debug("Token missing identity claims on %s", request.url.path)
        raise Forbidden("Invalid or expired token")

    identity = Identity(id=user_id, username=username)
    request.state.identity = identity
    return identity
