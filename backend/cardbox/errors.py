"""
错误类型与统一异常处理

所有错误最终渲染为 {"detail": "..."}，状态码由错误类型决定。
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from cardbox.config import settings

logger = logging.getLogger(__name__)


class CardboxError(Exception):
    """业务错误基类"""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CardboxError):
    status_code = 400
    default_message = "Invalid request"


class DuplicateUsername(CardboxError):
    status_code = 400
    default_message = "Username already exists"


class InvalidCredentials(CardboxError):
    """用户不存在与密码错误共用同一提示"""
    status_code = 400
    default_message = "Invalid username or password"


class Unauthenticated(CardboxError):
    status_code = 401
    default_message = "Not authenticated"


class Forbidden(CardboxError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(CardboxError):
    status_code = 404
    default_message = "Not found"


class InternalError(CardboxError):
    status_code = 500
    default_message = "Internal server error"


def format_validation_errors(errors) -> str:
    """把 pydantic 错误列表压成一行，带字段路径"""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or ValidationError.default_message


def _error_response(exc: CardboxError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def _internal_response(exc: Exception) -> JSONResponse:
    message = InternalError.default_message
    if settings.expose_internal_errors:
        message = f"{message}: {exc}"
    return _error_response(InternalError(message))


def register_exception_handlers(app: FastAPI) -> None:
    """注册统一异常处理"""

    @app.exception_handler(CardboxError)
    async def handle_cardbox_error(request: Request, exc: CardboxError):
        if isinstance(exc, InternalError):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return _error_response(ValidationError(format_validation_errors(exc.errors())))

    @app.exception_handler(SQLAlchemyError)
    async def handle_db_error(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return _internal_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _internal_response(exc)
