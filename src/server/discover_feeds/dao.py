# -*- coding: utf-8 -*-
"""
订阅源发现 DAO

- 公开接口：
    - `DiscoverFeedDAO`
    - `DiscoverFeedSubscriptionDAO`

内部方法：
- 无

文件功能：
- 封装订阅源与订阅关系的查询和写入。

说明：
- 写入操作只执行 `flush`，事务由调用方统一提交或回滚，
  以便订阅源与订阅关系在同一事务中落库。
- 唯一约束冲突会以 `sqlalchemy.exc.IntegrityError` 的形式在 `flush` 时抛出。
"""

from __future__ import annotations

from typing import List

from sqlalchemy import select

from src.server.dao.dao_base import BaseDAO
from .models import DiscoverFeed, DiscoverFeedSubscription
from .schemas import FeedMetadata


class DiscoverFeedDAO(BaseDAO):
    """订阅源 DAO"""

    def get_by_link(self, link: str) -> DiscoverFeed | None:
        stmt = select(DiscoverFeed).where(DiscoverFeed.link == link)
        return self.db_session.scalars(stmt).first()

    def create_feed(self, metadata: FeedMetadata) -> DiscoverFeed:
        feed = DiscoverFeed(
            title=metadata.title,
            link=metadata.link,
            image=metadata.image,
            type=metadata.type.value,
            description=metadata.description,
        )
        self.db_session.add(feed)
        self.db_session.flush()
        return feed


class DiscoverFeedSubscriptionDAO(BaseDAO):
    """订阅关系 DAO"""

    def list_by_user_and_feed(
        self, user_id: str, feed_id: str
    ) -> List[DiscoverFeedSubscription]:
        stmt = (
            select(DiscoverFeedSubscription)
            .where(
                DiscoverFeedSubscription.user_id == user_id,
                DiscoverFeedSubscription.feed_id == feed_id,
            )
            .order_by(DiscoverFeedSubscription.id.asc())
        )
        return list(self.db_session.scalars(stmt))

    def create_subscription(
        self, *, user_id: str, feed_id: str
    ) -> DiscoverFeedSubscription:
        subscription = DiscoverFeedSubscription(user_id=user_id, feed_id=feed_id)
        self.db_session.add(subscription)
        self.db_session.flush()
        return subscription
