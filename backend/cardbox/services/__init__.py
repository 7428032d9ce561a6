"""
业务服务层
"""
from cardbox.services.auth_service import AuthService

__all__ = ["AuthService"]
