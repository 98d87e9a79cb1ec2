# -*- coding: utf-8 -*-
"""
订阅源发现服务

功能：
- 组合抓取、解析、去重与订阅，完成“添加订阅源”用例
- 新订阅源创建成功后发布实体创建事件

公开接口：
- `add_discover_feed`

内部方法：
- `_subscribe_existing_feed`
- `_discover_new_feed`
- `_publish_feed_created`

说明：
- 查询、创建订阅源与创建订阅关系在同一会话事务中顺序执行，成功后统一提交。
- 校验失败以返回值表示；唯一约束冲突回滚后返回 CONFLICT；
  其余未预期的异常回滚并记录日志后返回 UNAUTHORIZED。
- 事件发布在提交之后执行，发布失败不影响已提交的订阅。
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.server.pubsub import EntityType, EventPublisher
from ..config import discover_config
from ..dao import DiscoverFeedDAO
from ..models import DiscoverFeed
from ..schemas import (
    AddDiscoverFeedError,
    AddDiscoverFeedErrorCode,
    AddDiscoverFeedSuccess,
    DiscoverFeedSchema,
)
from . import extract_service, fetch_service
from .subscription_service import subscribe_user_to_feed

DiscoverResult = Union[AddDiscoverFeedSuccess, AddDiscoverFeedError]


def _error(code: AddDiscoverFeedErrorCode) -> AddDiscoverFeedError:
    return AddDiscoverFeedError(error_codes=[code])


def add_discover_feed(
    db: Session,
    url: str,
    user_id: str,
    publisher: Optional[EventPublisher] = None,
) -> DiscoverResult:
    """为用户添加订阅源：已知链接直接订阅，未知链接先校验并创建订阅源。"""
    try:
        existing_feed = DiscoverFeedDAO(db).get_by_link(url)
        if existing_feed is not None:
            result = _subscribe_existing_feed(db, existing_feed, user_id)
            created = False
        else:
            result, created = _discover_new_feed(db, url, user_id)

        if isinstance(result, AddDiscoverFeedSuccess):
            db.commit()
        else:
            db.rollback()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(
            "添加订阅源时发生唯一约束冲突：url={}, user_id={}, 错误={}",
            url,
            user_id,
            exc.orig,
        )
        return _error(AddDiscoverFeedErrorCode.CONFLICT)
    except Exception:
        db.rollback()
        logger.exception("添加订阅源出现未预期的异常：url={}, user_id={}", url, user_id)
        return _error(AddDiscoverFeedErrorCode.UNAUTHORIZED)

    if created and isinstance(result, AddDiscoverFeedSuccess):
        _publish_feed_created(publisher, result.feed, user_id)
    return result


def _subscribe_existing_feed(
    db: Session, feed: DiscoverFeed, user_id: str
) -> DiscoverResult:
    logger.info("订阅源已存在：feed_id={}, link={}", feed.id, feed.link)
    return subscribe_user_to_feed(db, feed, user_id)


def _discover_new_feed(
    db: Session, url: str, user_id: str
) -> Tuple[DiscoverResult, bool]:
    fetched = fetch_service.fetch_feed(url)
    if not fetch_service.is_feed_content_type(fetched.content_type):
        logger.warning(
            "候选地址不是 XML 订阅源：url={}, content_type={}",
            url,
            fetched.content_type,
        )
        return _error(AddDiscoverFeedErrorCode.BAD_REQUEST), False

    metadata = extract_service.extract_feed_metadata(url, fetched.content)
    if metadata is None:
        return _error(AddDiscoverFeedErrorCode.BAD_REQUEST), False

    feed = DiscoverFeedDAO(db).create_feed(metadata)
    logger.info(
        "发现新订阅源：feed_id={}, type={}, link={}", feed.id, feed.type, feed.link
    )

    result = subscribe_user_to_feed(db, feed, user_id)
    return result, isinstance(result, AddDiscoverFeedSuccess)


def _publish_feed_created(
    publisher: Optional[EventPublisher],
    feed: DiscoverFeedSchema,
    user_id: str,
) -> None:
    if publisher is None:
        return
    try:
        publisher.entity_created(
            EntityType.RSS_FEED,
            {
                "feed": feed.model_dump(mode="json"),
                "libraryItemId": discover_config.discover_event_library_item_id,
            },
            user_id,
        )
    except Exception:
        logger.exception(
            "订阅源创建事件发布失败：feed_id={}, user_id={}", feed.id, user_id
        )
