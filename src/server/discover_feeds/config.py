# -*- coding: utf-8 -*-
"""
订阅源发现模块配置

公开接口：
- `discover_config`
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class DiscoverFeedConfig(BaseSettings):
    """订阅源发现模块配置"""

    # HTTP 请求配置
    discover_http_timeout: float = Field(
        default=20.0,
        title="HTTP 请求超时时间",
        description="抓取候选订阅地址的超时时间（秒）",
    )

    discover_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (compatible; DiscoverFeeds/0.1; "
            "+https://github.com/discover-feeds)"
        ),
        title="User-Agent",
        description="抓取订阅源时携带的 User-Agent",
    )

    discover_accept_header: str = Field(
        default=(
            "application/rss+xml, application/rdf+xml;q=0.8, "
            "application/atom+xml;q=0.6, application/xml;q=0.4, text/xml;q=0.4"
        ),
        title="Accept 请求头",
        description="抓取订阅源时声明可接受的内容类型",
    )

    # 校验配置
    discover_allowed_content_types: List[str] = Field(
        default=["rss+xml", "rdf+xml", "atom+xml", "application/xml", "text/xml"],
        title="允许的内容类型",
        description="响应 Content-Type 包含其中任意一项即视为 XML 订阅源",
    )

    # 事件配置
    discover_event_library_item_id: str = Field(
        default="NA",
        title="事件中的条目标识",
        description="订阅源创建事件不关联具体条目，使用该占位值",
    )


discover_config = DiscoverFeedConfig()
