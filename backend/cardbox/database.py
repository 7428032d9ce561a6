"""
数据库连接与会话管理
"""
import logging
import os
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from cardbox.config import settings

logger = logging.getLogger(__name__)

SQLITE_PREFIX = "sqlite+aiosqlite:///"

# 确保 SQLite 数据目录存在
if settings.database_url.startswith(SQLITE_PREFIX):
    _db_dir = os.path.dirname(settings.database_url[len(SQLITE_PREFIX):])
    if _db_dir:
        os.makedirs(_db_dir, exist_ok=True)

# 创建异步引擎
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    future=True,
)

# 创建异步会话工厂
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# 声明基类
Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """获取数据库会话（依赖注入用，每个请求一个会话）"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """初始化数据库（创建所有表）"""
    # 必须先导入所有模型，确保它们都已注册到 Base.metadata
    from cardbox import models  # noqa: F401
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
