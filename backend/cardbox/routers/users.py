"""
用户相关路由
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cardbox.database import get_db
from cardbox.dependencies import Identity, get_current_identity
from cardbox.errors import NotFound
from cardbox.schemas.auth import UserPublic
from cardbox.stores import UserStore

router = APIRouter()


@router.get("/me", response_model=UserPublic)
async def get_me(
    identity: Identity = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db),
):
    """当前用户资料"""
    user = await UserStore(db).find_by_id(identity.id)
    if user is None:
        raise NotFound("User not found")
    return UserPublic.model_validate(user)
