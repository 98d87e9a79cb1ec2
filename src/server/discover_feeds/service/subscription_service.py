# -*- coding: utf-8 -*-
"""
订阅关系服务

功能：
- 为用户建立与订阅源之间的订阅关系

公开接口：
- `subscribe_user_to_feed`

说明：
- 已存在一条订阅时直接复用，不重复写入。
- 已存在多条订阅属于历史遗留的重复数据，返回冲突，避免继续叠加。
- 并发写入触发的唯一约束冲突由 `IntegrityError` 向上抛出，由调用方统一回滚。
"""

from __future__ import annotations

from typing import Union

from loguru import logger
from sqlalchemy.orm import Session

from ..dao import DiscoverFeedSubscriptionDAO
from ..models import DiscoverFeed
from ..schemas import (
    AddDiscoverFeedError,
    AddDiscoverFeedErrorCode,
    AddDiscoverFeedSuccess,
    DiscoverFeedSchema,
)


def subscribe_user_to_feed(
    db: Session,
    feed: DiscoverFeed,
    user_id: str,
) -> Union[AddDiscoverFeedSuccess, AddDiscoverFeedError]:
    """确保用户订阅指定订阅源。"""
    subscription_dao = DiscoverFeedSubscriptionDAO(db)

    existing = subscription_dao.list_by_user_and_feed(user_id, feed.id)
    if len(existing) > 1:
        logger.warning(
            "检测到重复订阅记录：user_id={}, feed_id={}, count={}",
            user_id,
            feed.id,
            len(existing),
        )
        return AddDiscoverFeedError(error_codes=[AddDiscoverFeedErrorCode.CONFLICT])

    if existing:
        logger.info("订阅关系已存在：user_id={}, feed_id={}", user_id, feed.id)
    else:
        subscription_dao.create_subscription(user_id=user_id, feed_id=feed.id)
        logger.info("订阅关系已创建：user_id={}, feed_id={}", user_id, feed.id)

    return AddDiscoverFeedSuccess(feed=DiscoverFeedSchema.model_validate(feed))
