# -*- coding: utf-8 -*-
"""
订阅源发现模块入口

公开接口：
- `discover_config`
- `add_discover_feed`

内部方法：
- 无

文件功能：
- 暴露订阅源发现模块的主要能力，供其他模块复用服务层接口。
  路由请从 `discover_feeds.router` 子模块导入，避免与子模块同名。
"""

from typing import Any

from .config import discover_config

__all__ = [
    "discover_config",
    "add_discover_feed",
]


def __getattr__(name: str) -> Any:
    """按需加载服务层，避免导入时出现循环依赖。"""
    if name == "add_discover_feed":
        from .service import add_discover_feed as value
    else:
        raise AttributeError(
            f"module 'src.server.discover_feeds' has no attribute '{name}'"
        )
    return value


def __dir__() -> list[str]:
    return sorted(__all__)
