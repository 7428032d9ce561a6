"""
请求 / 响应 Schema
"""
from cardbox.schemas.auth import RegisterRequest, LoginRequest, UserPublic, LoginResponse
from cardbox.schemas.card import CardCreate, CardUpdate, CardOut, DeckStats, MessageResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserPublic",
    "LoginResponse",
    "CardCreate",
    "CardUpdate",
    "CardOut",
    "DeckStats",
    "MessageResponse",
]
