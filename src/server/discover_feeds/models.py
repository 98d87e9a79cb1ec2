# -*- coding: utf-8 -*-
"""
订阅源发现数据模型

公开接口：
- `DiscoverFeed`
- `DiscoverFeedSubscription`

内部方法：
- `_generate_feed_id`

文件功能：
- 定义已发现的订阅源及用户订阅关系的 SQLAlchemy ORM 模型。

说明：
- 订阅源以 `link` 唯一约束去重，并发创建时由数据库兜底。
- 订阅关系以 `(user_id, feed_id)` 唯一约束避免重复订阅。
- 所有时间字段统一使用 UTC。
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import (
    String,
    Integer,
    DateTime,
    Text,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.server.database import Base


def _generate_feed_id() -> str:
    return str(uuid4())


class DiscoverFeed(Base):
    __tablename__ = "discover_feed"
    __table_args__ = (UniqueConstraint("link", name="uq_discover_feed_link"),)

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=_generate_feed_id
    )
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    link: Mapped[str] = mapped_column(String(1024), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(1024), default=None)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    subscriptions: Mapped[List["DiscoverFeedSubscription"]] = relationship(
        "DiscoverFeedSubscription",
        back_populates="feed",
    )


class DiscoverFeedSubscription(Base):
    __tablename__ = "discover_feed_subscription"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "feed_id", name="uq_discover_feed_subscription_user_feed"
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    feed_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("discover_feed.id"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    feed: Mapped["DiscoverFeed"] = relationship(
        "DiscoverFeed", back_populates="subscriptions"
    )
