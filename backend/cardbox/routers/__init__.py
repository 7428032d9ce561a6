"""
API 路由
"""
from cardbox.routers import auth, cards, users

__all__ = [
    "auth",
    "users",
    "cards",
]
