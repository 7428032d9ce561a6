"""
持久化层：用户表与卡片表

只做按 id / username 的存取，不做归属判断（由 Card API 负责）。
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cardbox.errors import DuplicateUsername, ValidationError
from cardbox.models import User, Card, now_ms

logger = logging.getLogger(__name__)

# update() 允许修改的字段
CARD_MUTABLE_FIELDS = ("title", "category", "content", "tags")


class UserStore:
    """用户存储"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self.db.get(User, user_id)

    async def create(self, username: str, password_hash: str) -> User:
        """
        插入用户

        唯一性完全依赖 users.username 的唯一约束：并发注册时只有一个能提交成功，
        其余在提交时得到 IntegrityError。
        """
        user = User(username=username, password_hash=password_hash, created_at=now_ms())
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateUsername()
        return user


class CardStore:
    """卡片存储"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_by_owner(self, owner_id: str) -> List[Card]:
        """按创建时间倒序列出某用户的卡片"""
        result = await self.db.execute(
            select(Card)
            .where(Card.user_id == owner_id)
            .order_by(Card.created_at.desc(), Card.id.desc())
        )
        return list(result.scalars().all())

    async def insert(self, card: Card) -> Card:
        now = now_ms()
        if card.created_at is None:
            card.created_at = now
        if card.updated_at is None:
            card.updated_at = card.created_at
        self.db.add(card)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return card

    async def find_by_id(self, card_id: str) -> Optional[Card]:
        return await self.db.get(Card, card_id)

    async def update(self, card_id: str, fields: Dict[str, Any]) -> Optional[Card]:
        """
        部分更新：只改传入的字段，updated_at 总是刷新

        一次提交完成；提交失败时回滚，不会留下半更新的行。
        """
        for name in fields:
            if name not in CARD_MUTABLE_FIELDS:
                raise ValidationError(f"{name}: not an editable card field")
        card = await self.find_by_id(card_id)
        if card is None:
            return None
        for name, value in fields.items():
            setattr(card, name, value)
        card.updated_at = now_ms()
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return card

    async def delete(self, card_id: str) -> bool:
        result = await self.db.execute(delete(Card).where(Card.id == card_id))
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return result.rowcount > 0

    async def count_by_category(self, owner_id: str) -> Dict[str, int]:
        result = await self.db.execute(
            select(Card.category, func.count(Card.id))
            .where(Card.user_id == owner_id)
            .group_by(Card.category)
        )
        return {category: count for category, count in result.all()}
