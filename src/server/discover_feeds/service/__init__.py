# -*- coding: utf-8 -*-
"""
订阅源发现服务模块

此模块提供订阅源发现与订阅相关的所有业务逻辑。
"""

from .discover_service import add_discover_feed
from .extract_service import extract_feed_metadata
from .fetch_service import DiscoverFeedFetchError, fetch_feed, is_feed_content_type
from .subscription_service import subscribe_user_to_feed

__all__ = [
    "add_discover_feed",
    "extract_feed_metadata",
    "DiscoverFeedFetchError",
    "fetch_feed",
    "is_feed_content_type",
    "subscribe_user_to_feed",
]
