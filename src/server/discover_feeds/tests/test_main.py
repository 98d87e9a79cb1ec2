# -*- coding: utf-8 -*-
"""
应用装配测试
"""

from __future__ import annotations

from loguru import logger

from src.server.main import app, create_app


def test_app_exposes_discover_feed_route() -> None:
    """应用导入后注册了添加订阅源接口。"""
    paths = {
        (route.path, tuple(sorted(route.methods)))
        for route in app.routes
        if hasattr(route, "methods")
    }
    assert ("/api/discover-feeds", ("POST",)) in paths


def test_create_app_keeps_existing_log_sinks() -> None:
    """构建应用不应移除已有的日志输出目标。"""
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}")
    try:
        create_app()
        logger.info("sink still attached")
    finally:
        logger.remove(handler_id)
    assert any("sink still attached" in message for message in messages)
