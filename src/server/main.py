# -*- coding: utf-8 -*-
"""
应用入口

公开接口：
- `create_app`
- `setup_logging`
- `app`

文件功能：
- 装配各业务模块路由；应用启动时配置日志输出并按需创建数据表，
  导入本模块不产生日志配置副作用。
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from loguru import logger

from .config import server_config
from .database import init_db


def setup_logging() -> None:
    """配置 loguru 输出目标。"""
    logger.remove()
    logger.add(sys.stderr, level=server_config.log_level.upper())
    if server_config.log_file:
        logger.add(
            server_config.log_file,
            level=server_config.log_level.upper(),
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )


@asynccontextmanager
async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
    setup_logging()
    if server_config.auto_create_tables:
        init_db()
        logger.info("数据表检查完成")
    yield


def create_app() -> FastAPI:
    from .discover_feeds.router import router as discover_feeds_router

    app = FastAPI(title="Discover Feeds", lifespan=_lifespan)
    app.include_router(discover_feeds_router)
    return app


app = create_app()
