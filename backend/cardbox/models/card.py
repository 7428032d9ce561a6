"""
卡片模型
"""
from enum import Enum
import json
import uuid

from sqlalchemy import Column, String, BigInteger, ForeignKey, Text
from sqlalchemy.orm import relationship

from cardbox.database import Base
from cardbox.models.user import now_ms


class CardCategory(str, Enum):
    """卡片类别（固定集合）"""
    STORY = "story"
    PROMPT = "prompt"
    NOTE = "note"
    TEXT = "text"


class Card(Base):
    """卡片表"""
    __tablename__ = "cards"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(Text, nullable=False, default="")
    category = Column(String(20), nullable=False)
    content = Column(Text, nullable=False, default="")
    tags_json = Column(Text, nullable=False, default="[]")
    created_at = Column(BigInteger, nullable=False, default=now_ms)
    updated_at = Column(BigInteger, nullable=False, default=now_ms)

    # 关系
    owner = relationship("User", back_populates="cards")

    @property
    def tags(self) -> list:
        return json.loads(self.tags_json or "[]")

    @tags.setter
    def tags(self, value) -> None:
        self.tags_json = json.dumps(list(value or []), ensure_ascii=False)

    def __repr__(self):
        return f"<Card {self.id[:8]} {self.category}>"
