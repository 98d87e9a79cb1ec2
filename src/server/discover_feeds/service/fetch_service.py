# -*- coding: utf-8 -*-
"""
订阅源抓取服务

功能：
- 以固定的请求配置抓取候选订阅地址
- 校验响应声明的内容类型是否为 XML 订阅源

公开接口：
- `FetchedFeed`
- `DiscoverFeedFetchError`
- `fetch_feed`
- `is_feed_content_type`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import httpx

from ..config import discover_config

HTTP_TIMEOUT = discover_config.discover_http_timeout
REQUEST_HEADERS = {
    "User-Agent": discover_config.discover_user_agent,
    "Accept": discover_config.discover_accept_header,
}


class DiscoverFeedFetchError(RuntimeError):
    """候选订阅地址抓取失败"""


@dataclass(frozen=True)
class FetchedFeed:
    """抓取结果：原始内容与响应声明的内容类型"""

    url: str
    content: bytes
    content_type: str


def fetch_feed(
    url: str, *, transport: Optional[httpx.BaseTransport] = None
) -> FetchedFeed:
    """抓取候选订阅地址，网络错误或非 2xx 响应抛出 `DiscoverFeedFetchError`。"""
    try:
        with httpx.Client(
            timeout=HTTP_TIMEOUT,
            follow_redirects=True,
            headers=REQUEST_HEADERS,
            transport=transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return FetchedFeed(
                url=url,
                content=response.content,
                content_type=response.headers.get("content-type", ""),
            )
    except httpx.HTTPError as exc:
        raise DiscoverFeedFetchError(f"抓取订阅源失败：{exc}") from exc


def is_feed_content_type(
    content_type: str | None,
    allowed: Iterable[str] = tuple(discover_config.discover_allowed_content_types),
) -> bool:
    """判断内容类型是否为 rss+xml、rdf+xml、atom+xml 或通用 XML。"""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return any(marker in media_type for marker in allowed)
