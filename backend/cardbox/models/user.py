"""
用户模型
"""
from sqlalchemy import Column, String, BigInteger
from sqlalchemy.orm import relationship
import time
import uuid

from cardbox.database import Base


def now_ms() -> int:
    """当前时间（epoch 毫秒）"""
    return int(time.time() * 1000)


class User(Base):
    """用户表"""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(128), nullable=False)
    created_at = Column(BigInteger, nullable=False, default=now_ms)

    # 关系
    cards = relationship("Card", back_populates="owner", lazy="raise")

    def __repr__(self):
        return f"<User {self.username}>"
