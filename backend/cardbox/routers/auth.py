"""
认证路由（不经过会话校验，用于建立身份）
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cardbox.database import get_db
from cardbox.schemas.auth import RegisterRequest, LoginRequest, UserPublic, LoginResponse
from cardbox.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=UserPublic)
async def register(
    req: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """用户注册"""
    user = await AuthService(db).register(req.username, req.password)
    return UserPublic.model_validate(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """用户登录，返回 token 与用户信息"""
    token, user = await AuthService(db).login(req.username, req.password)
    return {"token": token, "user": {"id": user.id, "username": user.username}}
