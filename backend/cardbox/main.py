"""
卡片管理服务 - FastAPI 入口
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardbox.config import settings, DEV_JWT_SECRET
from cardbox.database import init_db
from cardbox.errors import register_exception_handlers
from cardbox.logging_config import setup_logging
from cardbox.routers import auth, cards, users

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动时
    if settings.jwt_secret == DEV_JWT_SECRET:
        logger.warning("JWT_SECRET is not set, using the development secret")
    await init_db()
    logger.info("Card service started")

    yield

    logger.info("Card service stopped")


# 创建应用
app = FastAPI(
    title="Cardbox",
    description="个人卡片管理：注册登录 + 按用户隔离的卡片增删改查",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 注册路由
app.include_router(auth.router, prefix="/api", tags=["认证"])
app.include_router(users.router, prefix="/api/users", tags=["用户"])
app.include_router(cards.router, prefix="/api/cards", tags=["卡片"])


@app.get("/health")
async def health():
    """健康检查"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "cardbox.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.debug,
    )
