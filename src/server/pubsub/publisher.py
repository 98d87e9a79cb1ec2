# -*- coding: utf-8 -*-
"""
实体事件发布

公开接口：
- `EntityType`
- `EventPublisher`
- `LoggingEventPublisher`
- `get_event_publisher`

文件功能：
- 定义业务层依赖的事件发布接口。实际的消息传输由部署环境注入，
  默认实现仅记录日志，便于本地开发与测试。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Protocol

from loguru import logger


class EntityType(str, Enum):
    """可发布事件的实体类型"""

    RSS_FEED = "RSS_FEED"


class EventPublisher(Protocol):
    def entity_created(
        self,
        entity_type: EntityType,
        payload: Dict[str, Any],
        owner_id: str,
    ) -> None: ...


class LoggingEventPublisher:
    """将实体创建事件写入日志的发布器。"""

    def entity_created(
        self,
        entity_type: EntityType,
        payload: Dict[str, Any],
        owner_id: str,
    ) -> None:
        logger.info(
            "实体创建事件：type={}, owner_id={}, payload_keys={}",
            entity_type.value,
            owner_id,
            sorted(payload),
        )


_default_publisher = LoggingEventPublisher()


def get_event_publisher() -> EventPublisher:
    """FastAPI 依赖：返回当前进程的事件发布器。"""
    return _default_publisher
