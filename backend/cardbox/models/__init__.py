"""
数据模型
"""
from cardbox.models.user import User, now_ms
from cardbox.models.card import Card, CardCategory

__all__ = [
    "User",
    "Card",
    "CardCategory",
    "now_ms",
]
