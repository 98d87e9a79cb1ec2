# -*- coding: utf-8 -*-
"""
服务端全局配置

公开接口：
- `server_config`
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseSettings):
    """服务端全局配置"""

    database_url: str = Field(
        default="sqlite:///./discover_feeds.db",
        title="数据库连接地址",
        description="SQLAlchemy 使用的数据库 URL",
    )

    auto_create_tables: bool = Field(
        default=True,
        title="自动建表",
        description="应用启动时是否根据 ORM 模型自动创建缺失的数据表",
    )

    # 日志配置
    log_level: str = Field(
        default="INFO",
        title="日志级别",
        description="标准错误输出的日志级别",
    )

    log_file: Optional[str] = Field(
        default=None,
        title="日志文件路径",
        description="设置后额外写入按大小滚动的日志文件",
    )


server_config = ServerConfig()
