# -*- coding: utf-8 -*-
"""
订阅源发现路由

公开接口：
- POST /api/discover-feeds

文件功能：
- 暴露“添加订阅源”接口。无论成功与否均返回带 `kind` 标签的结果体，
  由前端根据错误码决定提示内容。
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.server.auth.dependencies import CurrentUser, get_current_user
from src.server.database import get_db
from src.server.pubsub import EventPublisher, get_event_publisher
from .service import add_discover_feed
from .schemas import AddDiscoverFeedPayload, AddDiscoverFeedResult

router = APIRouter(prefix="/api/discover-feeds", tags=["Discover Feeds"])


@router.post(
    "",
    response_model=AddDiscoverFeedResult,
    summary="添加订阅源",
    response_description="返回订阅源信息或错误码列表",
)
def add_discover_feed_api(
    payload: AddDiscoverFeedPayload,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
    publisher: EventPublisher = Depends(get_event_publisher),
) -> AddDiscoverFeedResult:
    """校验候选地址并为当前用户订阅。"""
    return add_discover_feed(db, str(payload.url), current_user.id, publisher)
