# -*- coding: utf-8 -*-
"""
订阅源发现测试夹具
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Tuple

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.server.database import init_db
from src.server.discover_feeds.service import fetch_service
from src.server.discover_feeds.service.fetch_service import FetchedFeed
from src.server.pubsub import EntityType


class RecordingPublisher:
    """记录所有发布事件的测试发布器"""

    def __init__(self) -> None:
        self.events: List[Tuple[EntityType, Dict[str, Any], str]] = []

    def entity_created(
        self,
        entity_type: EntityType,
        payload: Dict[str, Any],
        owner_id: str,
    ) -> None:
        self.events.append((entity_type, payload, owner_id))


@pytest.fixture()
def test_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def test_db_session(test_engine: Engine) -> Iterator[Session]:
    TestingSession = sessionmaker(
        bind=test_engine, autoflush=False, expire_on_commit=False
    )
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture()
def serve_feed(monkeypatch: pytest.MonkeyPatch) -> Callable[..., List[str]]:
    """替换抓取函数，返回被请求过的地址列表。"""

    def _serve(body: str, content_type: str = "application/xml") -> List[str]:
        requested: List[str] = []

        def fake_fetch(url: str) -> FetchedFeed:
            requested.append(url)
            return FetchedFeed(
                url=url,
                content=body.encode("utf-8"),
                content_type=content_type,
            )

        monkeypatch.setattr(fetch_service, "fetch_feed", fake_fetch)
        return requested

    return _serve
