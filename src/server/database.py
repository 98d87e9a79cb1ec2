# -*- coding: utf-8 -*-
"""
数据库基础设施

公开接口：
- `Base`
- `engine`
- `SessionLocal`
- `get_db`
- `init_db`

文件功能：
- 提供 SQLAlchemy 声明基类、引擎与会话工厂，并以生成器依赖的方式
  为每个请求提供独立会话，保证在任何退出路径上都会释放连接。
"""

from __future__ import annotations

from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import server_config


class Base(DeclarativeBase):
    pass


def _build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI 在线程池中执行同步路由
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = _build_engine(server_config.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Iterator[Session]:
    """为单次请求提供数据库会话，结束后无论成功与否都关闭。"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """根据 ORM 模型创建缺失的数据表。"""
    # 注册模型到元数据
    from src.server.discover_feeds import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
