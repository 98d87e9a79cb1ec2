# -*- coding: utf-8 -*-
"""
订阅源发现 Pydantic 模型

- 公开接口：
    - `FeedType`
    - `FeedMetadata`
    - `DiscoverFeedSchema`
    - `AddDiscoverFeedPayload`
    - `AddDiscoverFeedErrorCode`
    - `AddDiscoverFeedSuccess`
    - `AddDiscoverFeedError`
    - `AddDiscoverFeedResult`

内部方法：
- 无

文件功能：
- 描述订阅源元数据、请求体以及“添加订阅源”操作的成功/失败结果。
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, HttpUrl


class FeedType(str, Enum):
    """订阅源格式，RDF 归并为 rss"""

    RSS = "rss"
    ATOM = "atom"


class FeedMetadata(BaseModel):
    """从订阅文档中提取的规范化元数据，尚未分配标识"""

    title: str
    description: str = ""
    image: Optional[str] = None
    link: str
    type: FeedType


class DiscoverFeedSchema(BaseModel):
    """已发现的订阅源"""

    id: str
    title: str
    link: str
    image: Optional[str] = None
    type: FeedType
    description: str = ""

    model_config = {"from_attributes": True}


class AddDiscoverFeedPayload(BaseModel):
    """添加订阅源的请求体"""

    url: HttpUrl = Field(..., description="候选订阅源地址")


class AddDiscoverFeedErrorCode(str, Enum):
    """添加订阅源失败时的错误码"""

    BAD_REQUEST = "BAD_REQUEST"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"


class AddDiscoverFeedSuccess(BaseModel):
    """添加订阅源成功"""

    kind: Literal["success"] = "success"
    feed: DiscoverFeedSchema


class AddDiscoverFeedError(BaseModel):
    """添加订阅源失败"""

    kind: Literal["error"] = "error"
    error_codes: List[AddDiscoverFeedErrorCode]


AddDiscoverFeedResult = Annotated[
    Union[AddDiscoverFeedSuccess, AddDiscoverFeedError],
    Field(discriminator="kind"),
]
