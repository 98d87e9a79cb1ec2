# -*- coding: utf-8 -*-
"""
事件发布模块

公开接口：
- `EntityType`
- `EventPublisher`
- `LoggingEventPublisher`
- `get_event_publisher`
"""

from .publisher import (
    EntityType,
    EventPublisher,
    LoggingEventPublisher,
    get_event_publisher,
)

__all__ = [
    "EntityType",
    "EventPublisher",
    "LoggingEventPublisher",
    "get_event_publisher",
]
